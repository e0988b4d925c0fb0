"""Alembic environment — async migration runner for the Movies API.

Uses the same settings as the application, so DB_HOST/DB_USER/... or
DATABASE_URL select the target database.

Design Decisions:
    - Settings object over alembic.ini URL: one source of truth for credentials
    - alembic.ini sqlalchemy.url only used when explicitly set (e.g. -x overrides in CI)
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from movies_api.config import get_settings
from movies_api.db.base import Base
# Import all models so Base.metadata has them
from movies_api.models.movie import Movie  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_database_url() -> str:
    """Get DB URL from alembic.ini when set, otherwise from application settings."""
    url = config.get_main_option("sqlalchemy.url")
    if url:
        return url
    configured = get_settings().sqlalchemy_url
    if isinstance(configured, str):
        return configured
    return configured.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations in 'online' mode with async engine."""
    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = _get_database_url()
    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
