"""Rename the seasonal seed pies.

Revision ID: 002_seed_data_update
Revises: 001_baseline
Create Date: 2021-10-26
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "002_seed_data_update"
down_revision: str | None = "001_baseline"
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None

_pies = sa.table(
    "pies",
    sa.column("id", sa.Integer),
    sa.column("name", sa.Text),
    sa.column("short_description", sa.Text),
)


def upgrade() -> None:
    op.execute(_pies.update().where(_pies.c.id == 5).values(name="Christmas Apple Pie"))
    op.execute(
        _pies.update().where(_pies.c.id == 6).values(short_description="A Christmas favorite")
    )


def downgrade() -> None:
    op.execute(_pies.update().where(_pies.c.id == 5).values(name="Apple Pie"))
    op.execute(
        _pies.update()
        .where(_pies.c.id == 6)
        .values(short_description="Your favorite Cranberry Pie")
    )
