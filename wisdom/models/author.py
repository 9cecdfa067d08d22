"""Author ORM — people who said the quotes.

Invariants:
    - id is integer primary key
    - name is required; avatar_url, company, twitter_username are nullable
    - twitter_username is the public lookup handle for /v1/author/{handle}
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wisdom.db.base import Base


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    twitter_username: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True,
    )
