"""SQL Quote Store — the storage accessor: one prepared statement per access pattern.

Invariants:
    - Statements are built once at import and shared by every request (read-only)
    - "No row" returns None / [] (an expected outcome, not an error)
    - Every SQLAlchemyError becomes InternalFailure tagged "SqlQuoteStore.<method>"

Design Decisions:
    - Core select() over ORM entities: handlers need plain rows, not identity-mapped objects
    - bindparam placeholders: SQLAlchemy caches the compiled form of each statement,
      the equivalent of a server-side prepared statement per pattern
    - ORDER BY random() LIMIT 1 for the random quote: uniform over the whole table
"""

from sqlalchemy import bindparam, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wisdom.core.domain_types import AuthorId, QuoteId, TagId
from wisdom.core.errors import InternalFailure
from wisdom.core.repository_protocols import Row
from wisdom.models.author import Author
from wisdom.models.quote import Quote
from wisdom.models.quote_tag import QuoteTag
from wisdom.models.tag import Tag


_authors = Author.__table__
_tags = Tag.__table__
_quotes = Quote.__table__

STMT_RANDOM_QUOTE = select(_quotes).order_by(func.random()).limit(1)
STMT_AUTHOR_BY_ID = select(_authors).where(
    _authors.c.id == bindparam("author_id"),
)
STMT_AUTHOR_BY_HANDLE = select(_authors).where(
    _authors.c.twitter_username == bindparam("handle"),
)
STMT_AUTHORS = select(_authors)
STMT_TAG_IDS_BY_QUOTE_ID = select(QuoteTag.tag_id).where(
    QuoteTag.quote_id == bindparam("quote_id"),
)
STMT_TAG_BY_ID = select(_tags).where(_tags.c.id == bindparam("tag_id"))
STMT_TAGS = select(_tags)
STMT_QUOTES_BY_AUTHOR_ID = select(_quotes).where(
    _quotes.c.author_id == bindparam("author_id"),
)


class SqlQuoteStore:
    """QuoteRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _one(self, tag: str, stmt, params: dict | None = None) -> Row | None:
        try:
            result = await self._db.execute(stmt, params or {})
            return result.mappings().first()
        except SQLAlchemyError as e:
            raise InternalFailure(f"SqlQuoteStore.{tag}", e) from e

    async def _many(self, tag: str, stmt, params: dict | None = None) -> list[Row]:
        try:
            result = await self._db.execute(stmt, params or {})
            return list(result.mappings().all())
        except SQLAlchemyError as e:
            raise InternalFailure(f"SqlQuoteStore.{tag}", e) from e

    async def fetch_random_quote(self) -> Row | None:
        return await self._one("fetch_random_quote", STMT_RANDOM_QUOTE)

    async def fetch_author_by_id(self, author_id: AuthorId) -> Row | None:
        return await self._one(
            "fetch_author_by_id", STMT_AUTHOR_BY_ID, {"author_id": author_id},
        )

    async def fetch_author_by_handle(self, handle: str) -> Row | None:
        return await self._one(
            "fetch_author_by_handle", STMT_AUTHOR_BY_HANDLE, {"handle": handle},
        )

    async def fetch_authors(self) -> list[Row]:
        return await self._many("fetch_authors", STMT_AUTHORS)

    async def fetch_tag_ids_by_quote_id(self, quote_id: QuoteId) -> list[TagId]:
        try:
            result = await self._db.execute(
                STMT_TAG_IDS_BY_QUOTE_ID, {"quote_id": quote_id},
            )
            return [TagId(tag_id) for tag_id in result.scalars().all()]
        except SQLAlchemyError as e:
            raise InternalFailure(
                "SqlQuoteStore.fetch_tag_ids_by_quote_id", e,
            ) from e

    async def fetch_tag_by_id(self, tag_id: TagId) -> Row | None:
        return await self._one(
            "fetch_tag_by_id", STMT_TAG_BY_ID, {"tag_id": tag_id},
        )

    async def fetch_tags(self) -> list[Row]:
        return await self._many("fetch_tags", STMT_TAGS)

    async def fetch_quotes_by_author_id(self, author_id: AuthorId) -> list[Row]:
        return await self._many(
            "fetch_quotes_by_author_id", STMT_QUOTES_BY_AUTHOR_ID,
            {"author_id": author_id},
        )
