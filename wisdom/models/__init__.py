"""ORM Models — SQLAlchemy declarative models for authors, tags and quotes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are written out-of-band; this service only reads them

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from wisdom.models.author import Author  # noqa: F401
from wisdom.models.tag import Tag  # noqa: F401
from wisdom.models.quote import Quote  # noqa: F401
from wisdom.models.quote_tag import QuoteTag  # noqa: F401
