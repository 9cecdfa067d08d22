"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL and PORT are required: a missing or invalid value fails startup
    - asyncpg_url() is shared with the Alembic environment
    - Settings are built once at process entry and passed to create_app() explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - No cached module-level instance: the app factory receives its Settings, tests build their own
    - Defaults provided for every non-required setting
    - LOG_LEVEL is checked here so uvicorn never sees an unknown level name
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def asyncpg_url(url: str) -> str:
    """Heroku-style postgres:// URLs need the asyncpg driver prefix."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(ge=1, le=65535)

    # Database
    database_url: str = Field(min_length=1)

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return asyncpg_url(v) if isinstance(v, str) else v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Response identity
    docs_url: str = "http://gophergala.github.io/wisdom"
    server_name: str = "Wisdom powered by Gophergala"
    media_type: str = "wisdom.V1"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level; WARN is accepted as WARNING."""
        level = str(v).strip().upper()
        if level == "WARN":
            level = "WARNING"
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
