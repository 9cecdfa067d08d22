"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database built from Base.metadata
    - seed_catalog inserts a small fixed catalog: 3 authors, 3 tags, 3 quotes
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

# Settings() must be constructible without a real environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PORT", "8080")

from wisdom.db.base import Base  # noqa: E402
from wisdom.models import Author, Quote, QuoteTag, Tag  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_catalog(test_db):
    """Rob Pike: quotes 1 (go, simplicity) and 2 (concurrency).
    Ada (no avatar/company): quote 3 without tags. Quiet: no quotes."""
    test_db.add_all([
        Author(
            id=1, avatar_url="https://avatars.example/rob.png",
            name="Rob Pike", company="Google", twitter_username="rob_pike",
        ),
        Author(
            id=2, avatar_url=None, name="Ada", company=None,
            twitter_username="ada",
        ),
        Author(
            id=3, avatar_url=None, name="Quiet", company=None,
            twitter_username="quiet",
        ),
        Tag(id=1, label="go"),
        Tag(id=2, label="simplicity"),
        Tag(id=3, label="concurrency"),
    ])
    await test_db.flush()
    test_db.add_all([
        Quote(
            id=1, author_id=1, post_id="p-1",
            content="Clear is better than clever.",
            permalink="https://example.com/p/1",
            picture_url="https://example.com/p/1.png",
        ),
        Quote(
            id=2, author_id=1, post_id="p-2",
            content="Don't communicate by sharing memory.",
            permalink="https://example.com/p/2",
            picture_url="https://example.com/p/2.png",
        ),
        Quote(
            id=3, author_id=2, post_id="p-3",
            content="The engine weaves algebraic patterns.",
            permalink="https://example.com/p/3",
            picture_url="https://example.com/p/3.png",
        ),
    ])
    await test_db.flush()
    test_db.add_all([
        QuoteTag(quote_id=1, tag_id=1),
        QuoteTag(quote_id=1, tag_id=2),
        QuoteTag(quote_id=2, tag_id=3),
    ])
    await test_db.commit()
