"""Database Session Manager — async connection pool, health check and request sessions.

Invariants:
    - One manager per process, created in the lifespan and stored on app.state
    - Connection pool uses pool_pre_ping for stale connection detection
    - The pool is disposed on shutdown

Design Decisions:
    - Manager on app.state instead of a module global: handlers get it through the
      request, tests replace get_db with dependency_overrides
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Query errors are mapped where the query runs (quote_store.py), so the
      diagnostic tag names the failing statement
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from wisdom.infrastructure.quote_store import SqlQuoteStore

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a read session, always closed afterwards."""
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (startup ping)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


async def get_quote_store(
    db: AsyncSession = Depends(get_db),
) -> SqlQuoteStore:
    """FastAPI dependency — the storage accessor bound to this request's session."""
    return SqlQuoteStore(db)
