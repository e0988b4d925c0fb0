"""Database Session Manager and startup lifecycle."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

import movies_api.infrastructure.database as db_module
from movies_api.config import Settings
from movies_api.infrastructure.database import DatabaseSessionManager
from movies_api.main import StartupError, app, lifespan


async def test_verify_connection_and_health_check_succeed():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.verify_connection()
    assert await manager.health_check() is True
    await manager.dispose()


async def test_session_rolls_back_and_reraises():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    with pytest.raises(OperationalError):
        async with manager.session() as session:
            await session.execute(text("SELECT * FROM no_such_table"))
    await manager.dispose()


async def test_health_check_false_when_unreachable(tmp_path):
    missing = tmp_path / "missing-dir" / "movies.db"
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{missing}")
    assert await manager.health_check() is False
    await manager.dispose()


async def test_lifespan_creates_and_disposes_pool(monkeypatch):
    monkeypatch.setattr(
        "movies_api.main.get_settings",
        lambda: Settings(database_url="sqlite+aiosqlite:///:memory:", log_format="text"),
    )
    async with lifespan(app):
        assert db_module.db_manager is not None
    assert db_module.db_manager is None


async def test_lifespan_aborts_when_database_unreachable(monkeypatch, tmp_path):
    missing = tmp_path / "missing-dir" / "movies.db"
    monkeypatch.setattr(
        "movies_api.main.get_settings",
        lambda: Settings(database_url=f"sqlite+aiosqlite:///{missing}", log_format="text"),
    )
    with pytest.raises(StartupError):
        async with lifespan(app):
            pass
    assert db_module.db_manager is None
