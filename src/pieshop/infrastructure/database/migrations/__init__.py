"""Alembic migrations for the shop database.

Configured in code; there is no alembic.ini. Revision scripts live in
``versions/`` next to this module and record their state in
:data:`VERSION_TABLE`.
"""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Connection

VERSION_TABLE = "pieshop_schema_version"


def build_config(db_path: Path, *, busy_timeout_ms: int = 5000) -> Config:
    """Alembic config targeting the shop database at *db_path*."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    cfg.set_main_option("sqlalchemy.url", f"sqlite:///{db_path}")
    cfg.attributes["busy_timeout_ms"] = busy_timeout_ms
    return cfg


def current_revision(conn: Connection) -> str | None:
    """Revision the database is stamped at, or None if never stamped."""
    ctx = MigrationContext.configure(conn, opts={"version_table": VERSION_TABLE})
    return ctx.get_current_revision()
