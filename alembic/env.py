"""Alembic environment for the arena schema (async engine, asyncpg)."""

import asyncio
from logging.config import fileConfig

from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Registers users, employees, tournaments and both session tables on Base.metadata.
import arena_api.infrastructure.persistence.models  # noqa: E402, F401
from arena_api.infrastructure.database import Base, Settings  # noqa: E402

target_metadata = Base.metadata


def _database_url() -> str:
    """DATABASE_URL (environment or .env) wins over alembic.ini's sqlalchemy.url."""
    settings = Settings()
    if "database_url" in settings.model_fields_set:
        return settings.database_url
    return config.get_main_option("sqlalchemy.url") or settings.database_url


def _configure(**kwargs) -> None:  # type: ignore[no-untyped-def]
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    _configure(
        url=_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    connectable = create_async_engine(_database_url(), echo=False)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
