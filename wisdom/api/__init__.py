"""API Layer — FastAPI routes, response formatting and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON (or JSONP) with the fixed service headers
"""
