"""Services — async orchestration of repository reads into API entities.

Invariants:
    - Services depend on core protocols, never on SQLAlchemy directly
"""
