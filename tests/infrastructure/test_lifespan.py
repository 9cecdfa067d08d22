"""Startup lifecycle — database ping gates startup; pool disposed on shutdown."""

import pytest

from wisdom.config import Settings
from wisdom.infrastructure.database import DatabaseSessionManager
from wisdom.main import create_app, lifespan


def _settings(database_url: str) -> Settings:
    return Settings(
        _env_file=None, database_url=database_url, port=8080, log_format="text",
    )


async def test_lifespan_opens_and_pings_database(tmp_path):
    app = create_app(_settings(f"sqlite+aiosqlite:///{tmp_path}/wisdom.db"))

    async with lifespan(app):
        assert isinstance(app.state.db_manager, DatabaseSessionManager)
        assert await app.state.db_manager.health_check() is True


async def test_lifespan_fails_when_ping_fails(tmp_path):
    missing_dir = tmp_path / "does-not-exist" / "wisdom.db"
    app = create_app(_settings(f"sqlite+aiosqlite:///{missing_dir}"))

    with pytest.raises(RuntimeError, match="ping failed"):
        async with lifespan(app):
            pass
    assert not hasattr(app.state, "db_manager")
