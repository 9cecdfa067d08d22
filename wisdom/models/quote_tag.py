"""QuoteTag ORM — association table for the quote <-> tag many-to-many."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from wisdom.db.base import Base


class QuoteTag(Base):
    __tablename__ = "quotes_tags"

    quote_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("quotes.id", ondelete="CASCADE"), primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
    )
