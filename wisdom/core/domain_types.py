"""Domain Types — identity types and entity names shared across layers.

Invariants:
    - AuthorId, TagId, QuoteId wrap integer primary keys
    - Entity values are the public names used in "<Entity> not found"
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AuthorId = NewType("AuthorId", int)
TagId = NewType("TagId", int)
QuoteId = NewType("QuoteId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Entity(str, Enum):
    """Entities exposed over the API."""
    AUTHOR = "Author"
    TAG = "Tag"
    QUOTE = "Quote"
