"""Core Layer — domain types, errors, storage contract and pure row mapping.

Invariants:
    - Core never imports from infrastructure/ or api/
    - Core functions are synchronous; IO happens in services/ through protocols
"""
