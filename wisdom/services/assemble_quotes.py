"""Quote Assembly — resolves quotes into fully populated entities via QuoteRepository.

Invariants:
    - Every returned Quote carries a full Author and a complete (possibly empty) Tag list
    - The first failure aborts the whole operation: no partial quote, no partial list
    - Missing quote / author / tag rows raise NotFoundError; storage faults arrive as InternalFailure
    - Relationship resolution is sequential, one query per related id

Design Decisions:
    - Plain async functions taking the repository: the route layer injects it, tests pass a fake
    - Tag ids collected first, then fetched one by one (association table -> tags)
    - random_quote_by_author guards the empty list explicitly (NotFound, never IndexError)
"""

import random
import time

from wisdom.core.domain_types import AuthorId, Entity, QuoteId
from wisdom.core.entity_rows import (
    author_from_row, quote_from_row, tag_from_row,
)
from wisdom.core.errors import NotFoundError
from wisdom.core.repository_protocols import QuoteRepository, Row
from wisdom.schemas.entities import Author, Quote, Tag

# Process-wide source, reseeded from the wall clock on each draw
_rng = random.Random()


async def resolve_tags(
    repo: QuoteRepository, quote_id: QuoteId, caller: str,
) -> list[Tag]:
    """Fetch every tag linked to a quote. Any unresolved id fails the call."""
    tags = []
    for tag_id in await repo.fetch_tag_ids_by_quote_id(quote_id):
        row = await repo.fetch_tag_by_id(tag_id)
        if row is None:
            raise NotFoundError(Entity.TAG.value, f"{caller}.fetch_tag_by_id")
        tags.append(tag_from_row(row))
    return tags


async def assemble_quote(
    repo: QuoteRepository, row: Row, caller: str, author: Author | None = None,
) -> Quote:
    """Build one Quote from its row, resolving the author unless already known."""
    if author is None:
        author_row = await repo.fetch_author_by_id(AuthorId(row["author_id"]))
        if author_row is None:
            raise NotFoundError(
                Entity.AUTHOR.value, f"{caller}.fetch_author_by_id",
            )
        author = author_from_row(author_row)
    tags = await resolve_tags(repo, QuoteId(row["id"]), caller)
    return quote_from_row(row, author, tags)


async def random_quote(repo: QuoteRepository) -> Quote:
    """One quote drawn uniformly from the whole table, fully resolved."""
    row = await repo.fetch_random_quote()
    if row is None:
        raise NotFoundError(Entity.QUOTE.value, "random_quote.fetch_random_quote")
    return await assemble_quote(repo, row, "random_quote")


async def find_author(repo: QuoteRepository, handle: str, caller: str) -> Author:
    row = await repo.fetch_author_by_handle(handle)
    if row is None:
        raise NotFoundError(
            Entity.AUTHOR.value, f"{caller}.fetch_author_by_handle",
        )
    return author_from_row(row)


async def quotes_for_author(
    repo: QuoteRepository, author: Author, caller: str,
) -> list[Quote]:
    rows = await repo.fetch_quotes_by_author_id(AuthorId(author.id))
    return [await assemble_quote(repo, row, caller, author) for row in rows]


async def quotes_by_author(repo: QuoteRepository, handle: str) -> list[Quote]:
    """All quotes of the author with this handle, each embedding the author."""
    author = await find_author(repo, handle, "quotes_by_author")
    return await quotes_for_author(repo, author, "quotes_by_author")


async def random_quote_by_author(
    repo: QuoteRepository, handle: str, rng: random.Random | None = None,
) -> Quote:
    """One quote picked uniformly from the author's resolved quotes."""
    author = await find_author(repo, handle, "random_quote_by_author")
    quotes = await quotes_for_author(repo, author, "random_quote_by_author")
    if not quotes:
        raise NotFoundError(
            Entity.QUOTE.value, "random_quote_by_author.no_quotes_for_author",
        )
    if rng is None:
        rng = _rng
        rng.seed(time.time_ns())
    return rng.choice(quotes)


async def list_authors(repo: QuoteRepository) -> list[Author]:
    return [author_from_row(row) for row in await repo.fetch_authors()]


async def list_tags(repo: QuoteRepository) -> list[Tag]:
    return [tag_from_row(row) for row in await repo.fetch_tags()]
