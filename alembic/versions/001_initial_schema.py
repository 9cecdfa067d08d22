"""Initial schema — authors, tags, quotes, quotes_tags.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("avatar_url", sa.Text, nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("twitter_username", sa.String(255), nullable=True),
    )
    op.create_index(
        "ix_authors_twitter_username", "authors", ["twitter_username"],
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
    )

    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("author_id", sa.Integer, sa.ForeignKey("authors.id"), nullable=False),
        sa.Column("post_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("permalink", sa.Text, nullable=False),
        sa.Column("picture_url", sa.Text, nullable=False),
    )
    op.create_index("ix_quotes_author_id", "quotes", ["author_id"])

    op.create_table(
        "quotes_tags",
        sa.Column(
            "quote_id", sa.Integer,
            sa.ForeignKey("quotes.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "tag_id", sa.Integer,
            sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("quotes_tags")
    op.drop_index("ix_quotes_author_id", table_name="quotes")
    op.drop_table("quotes")
    op.drop_table("tags")
    op.drop_index("ix_authors_twitter_username", table_name="authors")
    op.drop_table("authors")
