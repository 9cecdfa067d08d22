"""Quote ORM — a quotation with its source post.

Invariants:
    - author_id references authors.id (many-to-one)
    - Tags are linked through quotes_tags (see quote_tag.py)

Design Decisions:
    - No relationship() attributes: reads go through explicit statements in
      infrastructure/quote_store.py, one query per access pattern
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wisdom.db.base import Base


class Quote(Base):
    __tablename__ = "quotes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("authors.id"), nullable=False, index=True,
    )
    post_id: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    permalink: Mapped[str] = mapped_column(Text, nullable=False)
    picture_url: Mapped[str] = mapped_column(Text, nullable=False)
