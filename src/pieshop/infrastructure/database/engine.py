"""Database engine setup for SQLite with WAL mode.

SQLite is the record store: WAL mode for concurrent reads, foreign keys
for referential integrity, and ``BEGIN IMMEDIATE`` transactions so that a
read-modify-write sequence holds the write lock from its first read.
The DB is stored at {shop_root}/.pieshop/pieshop.db.

SQLAlchemy Core (not ORM) is used because each CLI invocation is a
short-lived request; no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from pieshop.config.discovery import DATA_DIRNAME
from pieshop.infrastructure.database.schema import metadata
from pieshop.infrastructure.database.seed import seed_catalog

DB_FILENAME = "pieshop.db"


def db_path_for(shop_root: Path) -> Path:
    """Location of the database file for a shop rooted at *shop_root*."""
    return shop_root / DATA_DIRNAME / DB_FILENAME


def create_db_engine(db_path: Path, *, busy_timeout_ms: int = 5000) -> Engine:
    """Create a SQLite engine with WAL mode, foreign keys and immediate transactions.

    pysqlite's own transaction handling is disabled so that every
    ``engine.begin()`` emits ``BEGIN IMMEDIATE`` (the SQLAlchemy-documented
    recipe for SQLite).
    """
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def init_database(shop_root: Path, *, busy_timeout_ms: int = 5000) -> Engine:
    """Initialize the pieshop database at ``{shop_root}/.pieshop/pieshop.db``.

    Creates the ``.pieshop/`` directory structure, all tables from
    :data:`schema.metadata`, and seeds the catalog.

    Idempotent; safe to call on an existing shop.

    Returns the engine ready for use.
    """
    data_dir = shop_root / DATA_DIRNAME
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "backups").mkdir(exist_ok=True)
    (data_dir / "sessions").mkdir(exist_ok=True)

    engine = create_db_engine(db_path_for(shop_root), busy_timeout_ms=busy_timeout_ms)

    metadata.create_all(engine)

    with engine.begin() as conn:
        seed_catalog(conn)
    return engine
