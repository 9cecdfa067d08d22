"""Wisdom — read-only quotes/authors/tags API with JSONP support.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
