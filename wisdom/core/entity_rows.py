"""Entity Rows — pure conversion from storage rows to wire entities.

Invariants:
    - No IO: every function maps already-fetched rows
    - Optional author columns that are NULL come out as ""
    - A Quote is only built once its Author and full Tag list are known
"""

from wisdom.core.repository_protocols import Row
from wisdom.schemas.entities import Author, Quote, Tag


def author_from_row(row: Row) -> Author:
    return Author(
        id=row["id"],
        avatar_url=row["avatar_url"],
        name=row["name"],
        company=row["company"],
        twitter_username=row["twitter_username"],
    )


def tag_from_row(row: Row) -> Tag:
    return Tag(id=row["id"], label=row["label"])


def quote_from_row(row: Row, author: Author, tags: list[Tag]) -> Quote:
    """Compose a Quote from its row plus the resolved relationships."""
    return Quote(
        id=row["id"],
        post_id=row["post_id"],
        author=author,
        content=row["content"],
        permalink=row["permalink"],
        picture_url=row["picture_url"],
        tags=tags,
    )
