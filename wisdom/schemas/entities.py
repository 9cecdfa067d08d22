"""Entity Schemas — wire shapes for Author, Tag, Quote and the error body.

Invariants:
    - Field order matches the published JSON layout
    - Author string fields are never null on the wire: NULL columns become ""
    - Quote.author is a full Author (never a bare foreign key)
    - Quote.tags is always a list (possibly empty)

Design Decisions:
    - field_validator(mode="before") for NULL -> "": normalization lives with the schema,
      so every code path that builds an Author gets it
"""

from pydantic import BaseModel, Field, field_validator


class Author(BaseModel):
    """Quote author."""
    id: int
    avatar_url: str = ""
    name: str = ""
    company: str = ""
    twitter_username: str = ""

    @field_validator(
        "avatar_url", "name", "company", "twitter_username", mode="before",
    )
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v


class Tag(BaseModel):
    id: int
    label: str


class Quote(BaseModel):
    """Quote with its author and tags resolved."""
    id: int
    post_id: str
    author: Author
    content: str
    permalink: str
    picture_url: str
    tags: list[Tag] = Field(default_factory=list)


class ErrorBody(BaseModel):
    """Error response — public message and numeric status."""
    error: str
    code: int
