"""Static catalog seed data.

Rows reflect the catalog after the ``002_seed_data_update`` migration.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import insert, select

from pieshop.domain.money import decimal_to_cents
from pieshop.infrastructure.database.schema import categories, pies

_LOREM = "Lorem Ipsum"

SEED_CATEGORIES: list[dict[str, Any]] = [
    {"id": 1, "name": "Fruit pies", "description": "All-fruity pies"},
    {"id": 2, "name": "Cheese cakes", "description": "Cheesy all the way"},
    {"id": 3, "name": "Seasonal pies", "description": "Get in the mood for a seasonal pie"},
]


def _pie(
    pie_id: int,
    name: str,
    price: str,
    *,
    category_id: int,
    week: bool = False,
    in_stock: bool = True,
    short_description: str = _LOREM,
) -> dict[str, Any]:
    return {
        "id": pie_id,
        "name": name,
        "price_cents": decimal_to_cents(Decimal(price)),
        "short_description": short_description,
        "long_description": _LOREM,
        "allergy_information": _LOREM,
        "image_url": _LOREM,
        "image_thumbnail_url": _LOREM,
        "is_pie_of_the_week": int(week),
        "in_stock": int(in_stock),
        "category_id": category_id,
    }


SEED_PIES: list[dict[str, Any]] = [
    _pie(1, "Strawberry Pie", "15.95", category_id=1, week=True),
    _pie(2, "Cheese Cake", "18.95", category_id=2),
    _pie(3, "Rhubarb Pie", "15.95", category_id=1, week=True),
    _pie(4, "Pumpkin Pie", "12.95", category_id=3, in_stock=False),
    _pie(5, "Christmas Apple Pie", "12.95", category_id=3),
    _pie(6, "Cranberry Pie", "17.95", category_id=3, short_description="A Christmas favorite"),
]


def seed_catalog(conn: Any) -> int:
    """Insert seed categories and pies that are not present yet.

    The caller owns the transaction. Existing rows are left untouched so
    re-running against a populated database is a no-op.

    Returns the number of rows inserted.
    """
    inserted = 0
    for table, rows in ((categories, SEED_CATEGORIES), (pies, SEED_PIES)):
        existing = {row.id for row in conn.execute(select(table.c.id))}
        missing = [row for row in rows if row["id"] not in existing]
        if missing:
            conn.execute(insert(table), missing)
            inserted += len(missing)
    return inserted
