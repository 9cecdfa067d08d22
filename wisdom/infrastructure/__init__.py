"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - Driver errors are mapped to core/errors.py types at this boundary
"""
