"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL sequence syncing not exercised here)
    - Lifespan not run by ASGITransport: no real pool is ever created
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from movies_api.db.base import Base
from movies_api.infrastructure.database import get_db, DatabaseSessionManager
from movies_api.models.movie import Movie
import movies_api.infrastructure.database as db_module
from movies_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_movie(test_db):
    """Insert one movie directly into the test DB."""
    movie = Movie(title="Alien", year=1979)
    test_db.add(movie)
    await test_db.commit()
    await test_db.refresh(movie)
    return movie


@pytest.fixture
def count_movies(test_session_factory):
    """Count rows with a fresh session (no identity-map leftovers)."""
    from sqlalchemy import func, select

    async def _count() -> int:
        async with test_session_factory() as session:
            result = await session.execute(select(func.count(Movie.id)))
            return result.scalar_one()

    return _count
