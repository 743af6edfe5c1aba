"""Baseline schema and the original catalog rows.

Revision ID: 001_baseline
Revises: None
Create Date: 2021-10-20

Creates categories, pies and cart_lines, and inserts the catalog as it
was first published. Databases created by ``pieshop init`` are stamped
at head without running this.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None

_LOREM = "Lorem Ipsum"


def upgrade() -> None:
    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False, unique=True),
        sa.Column("description", sa.Text),
    )

    pies = op.create_table(
        "pies",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("price_cents", sa.Integer, nullable=False),
        sa.Column("short_description", sa.Text),
        sa.Column("long_description", sa.Text),
        sa.Column("allergy_information", sa.Text),
        sa.Column("image_url", sa.Text),
        sa.Column("image_thumbnail_url", sa.Text),
        sa.Column("is_pie_of_the_week", sa.Integer, server_default="0"),
        sa.Column("in_stock", sa.Integer, server_default="1"),
        sa.Column("category_id", sa.Integer, sa.ForeignKey("categories.id")),
    )
    op.create_index("ix_pies_pie_of_the_week", "pies", ["is_pie_of_the_week"])

    op.create_table(
        "cart_lines",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("cart_id", sa.Text, nullable=False),
        sa.Column("pie_id", sa.Integer, sa.ForeignKey("pies.id"), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.UniqueConstraint("cart_id", "pie_id", name="uq_cart_lines_cart_pie"),
        sa.CheckConstraint("quantity >= 1", name="ck_cart_lines_quantity_positive"),
    )
    op.create_index("ix_cart_lines_cart_id", "cart_lines", ["cart_id"])

    op.bulk_insert(
        categories,
        [
            {"id": 1, "name": "Fruit pies", "description": "All-fruity pies"},
            {"id": 2, "name": "Cheese cakes", "description": "Cheesy all the way"},
            {"id": 3, "name": "Seasonal pies", "description": "Get in the mood for a seasonal pie"},
        ],
    )

    rows = [
        (1, "Strawberry Pie", 1595, 1, 1, 1, _LOREM),
        (2, "Cheese Cake", 1895, 2, 0, 1, _LOREM),
        (3, "Rhubarb Pie", 1595, 1, 1, 1, _LOREM),
        (4, "Pumpkin Pie", 1295, 3, 0, 0, _LOREM),
        (5, "Apple Pie", 1295, 3, 0, 1, _LOREM),
        (6, "Cranberry Pie", 1795, 3, 0, 1, "Your favorite Cranberry Pie"),
    ]
    op.bulk_insert(
        pies,
        [
            {
                "id": pie_id,
                "name": name,
                "price_cents": price_cents,
                "category_id": category_id,
                "is_pie_of_the_week": week,
                "in_stock": in_stock,
                "short_description": short,
                "long_description": _LOREM,
                "allergy_information": _LOREM,
                "image_url": _LOREM,
                "image_thumbnail_url": _LOREM,
            }
            for pie_id, name, price_cents, category_id, week, in_stock, short in rows
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_cart_lines_cart_id", "cart_lines")
    op.drop_table("cart_lines")
    op.drop_index("ix_pies_pie_of_the_week", "pies")
    op.drop_table("pies")
    op.drop_table("categories")
