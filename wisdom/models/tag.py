"""Tag ORM — read-only reference labels attached to quotes."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from wisdom.db.base import Base


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
