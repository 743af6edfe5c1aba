"""Alembic environment for the shop database."""

from __future__ import annotations

from typing import Any

from alembic import context
from sqlalchemy import create_engine, event, pool

from pieshop.infrastructure.database.migrations import VERSION_TABLE
from pieshop.infrastructure.database.schema import metadata

config = context.config


def _connect_pragmas(busy_timeout_ms: int) -> Any:
    def _on_connect(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
        cursor.close()

    return _on_connect


def run_offline() -> None:
    """Render the migration SQL instead of executing it."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=metadata,
        version_table=VERSION_TABLE,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    url = config.get_main_option("sqlalchemy.url")
    if url is None:
        raise RuntimeError("sqlalchemy.url is not set; use build_config()")

    engine = create_engine(url, poolclass=pool.NullPool)
    busy_timeout_ms = config.attributes.get("busy_timeout_ms", 5000)
    event.listen(engine, "connect", _connect_pragmas(busy_timeout_ms))

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            version_table=VERSION_TABLE,
            render_as_batch=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
