"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Meant for scripts and test fixtures
    - Sessions never expire attributes on commit

Design Decisions:
    - Separate from infrastructure/database.py: no pooling knobs, no error mapping
    - engine_kwargs passed through so tests can pick the SQLite pool they need
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str, **engine_kwargs,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an async engine and session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False, **engine_kwargs)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
