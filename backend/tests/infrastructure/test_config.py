"""Settings — URL assembly and environment overrides."""

from sqlalchemy.engine import URL

from movies_api.config import Settings


def test_url_built_from_parts_when_database_url_unset():
    settings = Settings(
        database_url=None, db_host="db", db_user="u", db_password="p@ss/word",
        db_name="films", db_port=5433,
    )
    url = settings.sqlalchemy_url
    assert isinstance(url, URL)
    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db"
    assert url.port == 5433
    assert url.database == "films"
    assert url.password == "p@ss/word"


def test_database_url_wins_over_parts():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db", db_host="ignored")
    assert settings.sqlalchemy_url == "sqlite+aiosqlite:///x.db"


def test_plain_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://u:p@h:5432/d")
    assert settings.sqlalchemy_url == "postgresql+asyncpg://u:p@h:5432/d"


def test_empty_database_url_treated_as_unset():
    settings = Settings(database_url="")
    assert isinstance(settings.sqlalchemy_url, URL)


def test_env_variables_are_read(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DB_POOL_SIZE", "4")
    settings = Settings()
    assert settings.port == 8080
    assert settings.db_pool_size == 4
    assert settings.db_max_overflow == 0
