"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Providers seeded with explicit ids so tests can reference them by number
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pricebook.db.base import Base
from pricebook.db.session import create_session_factory
from pricebook.infrastructure.database import get_db, DatabaseSessionManager
from pricebook.models.provider import Provider
import pricebook.infrastructure.database as db_module
from pricebook.main import app


@pytest.fixture
async def test_engine_and_factory():
    engine, factory = create_session_factory("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine, factory
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine_and_factory):
    return test_engine_and_factory[1]


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine_and_factory):
    """FastAPI test client with DB dependency overridden."""
    engine, factory = test_engine_and_factory

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_providers(test_db):
    """Insert providers with fixed ids: 7 = ACME Capital, 8 = Birch Partners."""
    providers = [
        Provider(id=7, name="ACME Capital"),
        Provider(id=8, name="Birch Partners"),
    ]
    test_db.add_all(providers)
    await test_db.commit()
    return {p.id: p for p in providers}
