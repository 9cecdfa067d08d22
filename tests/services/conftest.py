"""Service test fixtures — an in-memory QuoteRepository fake.

Invariants:
    - FakeQuoteRepository satisfies QuoteRepository structurally (no inheritance)
    - calls records every method invocation in order
    - fail_on makes a named method raise InternalFailure
"""

import pytest

from wisdom.core.errors import InternalFailure


class FakeQuoteRepository:
    def __init__(self, authors=(), tags=(), quotes=(), links=()):
        self.authors = {a["id"]: a for a in authors}
        self.tags = {t["id"]: t for t in tags}
        self.quotes = {q["id"]: q for q in quotes}
        self.links = list(links)
        self.calls: list[tuple] = []
        self.fail_on: set[str] = set()
        self.random_id = None

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise InternalFailure(f"FakeQuoteRepository.{name}", OSError("boom"))

    async def fetch_random_quote(self):
        self._record("fetch_random_quote")
        if not self.quotes:
            return None
        return self.quotes[self.random_id or next(iter(self.quotes))]

    async def fetch_author_by_id(self, author_id):
        self._record("fetch_author_by_id", author_id)
        return self.authors.get(author_id)

    async def fetch_author_by_handle(self, handle):
        self._record("fetch_author_by_handle", handle)
        for a in self.authors.values():
            if a["twitter_username"] == handle:
                return a
        return None

    async def fetch_authors(self):
        self._record("fetch_authors")
        return list(self.authors.values())

    async def fetch_tag_ids_by_quote_id(self, quote_id):
        self._record("fetch_tag_ids_by_quote_id", quote_id)
        return [tag_id for qid, tag_id in self.links if qid == quote_id]

    async def fetch_tag_by_id(self, tag_id):
        self._record("fetch_tag_by_id", tag_id)
        return self.tags.get(tag_id)

    async def fetch_tags(self):
        self._record("fetch_tags")
        return list(self.tags.values())

    async def fetch_quotes_by_author_id(self, author_id):
        self._record("fetch_quotes_by_author_id", author_id)
        return [q for q in self.quotes.values() if q["author_id"] == author_id]


def author_row(id, name, handle, avatar_url=None, company=None):
    return {
        "id": id, "avatar_url": avatar_url, "name": name,
        "company": company, "twitter_username": handle,
    }


def quote_row(id, author_id):
    return {
        "id": id, "author_id": author_id, "post_id": f"p-{id}",
        "content": f"quote {id}", "permalink": f"https://example.com/{id}",
        "picture_url": f"https://example.com/{id}.png",
    }


@pytest.fixture
def repo():
    return FakeQuoteRepository(
        authors=[
            author_row(1, "Rob Pike", "rob_pike", "https://a/rob.png", "Google"),
            author_row(2, "Ada", "ada"),
            author_row(3, "Quiet", "quiet"),
        ],
        tags=[
            {"id": 10, "label": "go"},
            {"id": 11, "label": "simplicity"},
        ],
        quotes=[quote_row(100, 1), quote_row(101, 1), quote_row(102, 2)],
        links=[(100, 10), (100, 11), (101, 11)],
    )
