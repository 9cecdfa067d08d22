"""API test fixtures — application built by create_app with the DB dependency overridden.

Invariants:
    - get_db overridden to use the per-test SQLite session factory
    - Lifespan is not run by ASGITransport, so no real database is contacted

Design Decisions:
    - broken_db yields a session whose execute() raises OperationalError, to
      drive the storage-failure path end to end
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom.config import Settings
from wisdom.infrastructure.database import get_db
from wisdom.main import create_app


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        port=8080,
        log_format="text",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def broken_db_client(app):
    """Client whose every query fails with a driver-level OperationalError."""
    async def override_get_db():
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = OperationalError(
            "SELECT * FROM tags", {}, ConnectionRefusedError("db down"),
        )
        yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
