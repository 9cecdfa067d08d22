"""Boundary Protocols — the read contract between the assembler and storage.

Invariants:
    - Services NEVER import the SQL implementation; they depend on QuoteRepository
    - "No row" is returned as None (single fetch) or [] (multi fetch), never raised
    - Connectivity and query failures are raised as InternalFailure (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass a plain fake (ADR: no inheritance hierarchy)
    - Rows are plain mappings keyed by column name: the assembler owns the entity shape
"""

from typing import Any, Mapping, Protocol

from wisdom.core.domain_types import AuthorId, QuoteId, TagId

Row = Mapping[str, Any]


class QuoteRepository(Protocol):
    """Contract for quote/author/tag reads — implemented by infrastructure."""
    async def fetch_random_quote(self) -> Row | None: ...
    async def fetch_author_by_id(self, author_id: AuthorId) -> Row | None: ...
    async def fetch_author_by_handle(self, handle: str) -> Row | None: ...
    async def fetch_authors(self) -> list[Row]: ...
    async def fetch_tag_ids_by_quote_id(self, quote_id: QuoteId) -> list[TagId]: ...
    async def fetch_tag_by_id(self, tag_id: TagId) -> Row | None: ...
    async def fetch_tags(self) -> list[Row]: ...
    async def fetch_quotes_by_author_id(self, author_id: AuthorId) -> list[Row]: ...
