"""Infrastructure Layer — database sessions, HTTP client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - External failures mapped to the error hierarchy in core/errors.py

Design Decisions:
    - Thin wrappers over raw clients (SQLAlchemy engine, httpx)
"""
