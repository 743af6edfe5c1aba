"""SQLAlchemy Core table definitions for the pieshop database.

Prices are stored as integer cents (``price_cents``) so the cart total
aggregate is computed exactly by SQLite.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False, unique=True),
    Column("description", Text),
)

pies = Table(
    "pies",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False),
    Column("price_cents", Integer, nullable=False),
    Column("short_description", Text),
    Column("long_description", Text),
    Column("allergy_information", Text),
    Column("image_url", Text),
    Column("image_thumbnail_url", Text),
    Column("is_pie_of_the_week", Integer, default=0, server_default="0"),
    Column("in_stock", Integer, default=1, server_default="1"),
    Column("category_id", Integer, ForeignKey("categories.id")),
)

cart_lines = Table(
    "cart_lines",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("cart_id", Text, nullable=False),
    Column("pie_id", Integer, ForeignKey("pies.id"), nullable=False),
    Column("quantity", Integer, nullable=False),
    UniqueConstraint("cart_id", "pie_id", name="uq_cart_lines_cart_pie"),
    CheckConstraint("quantity >= 1", name="ck_cart_lines_quantity_positive"),
)

Index("ix_cart_lines_cart_id", cart_lines.c.cart_id)
Index("ix_pies_pie_of_the_week", pies.c.is_pie_of_the_week)
