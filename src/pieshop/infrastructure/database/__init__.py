"""SQLite database engine, schema, and catalog seed via SQLAlchemy Core."""

from pieshop.infrastructure.database.engine import create_db_engine, db_path_for, init_database
from pieshop.infrastructure.database.schema import cart_lines, categories, metadata, pies
from pieshop.infrastructure.database.seed import SEED_CATEGORIES, SEED_PIES, seed_catalog

__all__ = [
    "SEED_CATEGORIES",
    "SEED_PIES",
    "cart_lines",
    "categories",
    "create_db_engine",
    "db_path_for",
    "init_database",
    "metadata",
    "pies",
    "seed_catalog",
]
