"""Alembic environment for the incident database.

The URL comes from incident_tracking.config, so `alembic upgrade head` always
migrates the database the service is configured for (APP_ENV, appsettings
files, .env and DATABASE_URL all apply).
"""

import asyncio
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import async_engine_from_config

import incident_tracking.models  # noqa: F401 — registers Incident with Base.metadata
from incident_tracking.config import settings
from incident_tracking.db.session import Base

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _configure(**kwargs: Any) -> None:
    """Shared context options.

    SQLite cannot ALTER most constraints in place, so its migrations run in
    batch mode (copy-and-move tables).
    """
    is_sqlite = make_url(settings.database_url).get_backend_name() == "sqlite"
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=is_sqlite,
        **kwargs,
    )


def migrate_offline() -> None:
    """Print migration SQL instead of running it: alembic upgrade head --sql"""
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate_on(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    """Run migrations over one unpooled async connection, then dispose the engine."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_on)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
