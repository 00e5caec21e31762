"""
Alembic Migration Environment
===============================

What:  Runs migrations through the application's async SQLAlchemy setup.
How:   Takes DATABASE_URL from restaurant_api.config and the metadata of
       the four models; online runs use an async engine with NullPool.
Who:   `alembic upgrade head` / `alembic revision --autogenerate` from backend/.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from restaurant_api.config import settings
from restaurant_api.database import Base

# Register every table with Base.metadata for --autogenerate
from restaurant_api.models.menu_item import MenuItem  # noqa: F401
from restaurant_api.models.order import Order  # noqa: F401
from restaurant_api.models.reservation import Reservation  # noqa: F401
from restaurant_api.models.testimonial import Testimonial  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# DATABASE_URL wins over alembic.ini
config.set_main_option("sqlalchemy.url", settings.database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting (alembic upgrade --sql)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    """
    Apply migrations on one connection.

    SQLite cannot ALTER constraints in place, so later revisions that change
    the CHECK constraints on category, status or rating run in batch mode
    there (copy, recreate, swap). PostgreSQL uses plain ALTER TABLE.
    """
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # NullPool: one short-lived connection per alembic invocation
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
