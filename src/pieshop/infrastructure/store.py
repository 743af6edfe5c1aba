"""Store: the record store behind the catalog and the cart.

The Store is the single dependency injected into every service. It owns
the database engine; callers (one per request) own its lifetime. The
:meth:`Store.transaction` context manager yields a :class:`StoreTransaction`
whose helpers are the only data-access paths the services use:

- point lookup of a cart line by ``(cart_id, pie_id)``
- atomic insert-or-increment, in-place adjustment, and delete of a single line
- bulk delete of every line of a cart
- listing a cart's lines joined with their pies
- the ``price × quantity`` sum aggregate

Every transaction starts with ``BEGIN IMMEDIATE`` (see
:mod:`pieshop.infrastructure.database.engine`), so a read followed by a
write inside one transaction cannot interleave with another writer.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from pieshop.domain.cart import CartLine
from pieshop.domain.catalog import Category, Pie
from pieshop.domain.money import cents_to_decimal
from pieshop.infrastructure.database.engine import db_path_for, init_database
from pieshop.infrastructure.database.schema import cart_lines, categories, pies

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from pieshop.config.settings import PieSettings

logger = logging.getLogger(__name__)


def _pie_from_row(row: Any) -> Pie:
    return Pie(
        id=row.id,
        name=row.name,
        price=cents_to_decimal(row.price_cents),
        short_description=row.short_description or "",
        long_description=row.long_description or "",
        allergy_information=row.allergy_information or "",
        image_url=row.image_url or "",
        image_thumbnail_url=row.image_thumbnail_url or "",
        is_pie_of_the_week=bool(row.is_pie_of_the_week),
        in_stock=bool(row.in_stock),
        category_id=row.category_id,
    )


# ---------------------------------------------------------------------------
# StoreTransaction: yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active transaction context wrapping one DB connection."""

    conn: Connection

    # ------------------------------------------------------------------
    # Catalog reads
    # ------------------------------------------------------------------

    def get_pie(self, pie_id: int) -> Pie | None:
        row = self.conn.execute(select(pies).where(pies.c.id == pie_id)).first()
        return _pie_from_row(row) if row is not None else None

    def list_pies(self, *, week_only: bool = False) -> list[Pie]:
        stmt = select(pies).order_by(pies.c.id)
        if week_only:
            stmt = stmt.where(pies.c.is_pie_of_the_week == 1)
        return [_pie_from_row(row) for row in self.conn.execute(stmt)]

    def list_categories(self) -> list[Category]:
        rows = self.conn.execute(select(categories).order_by(categories.c.id))
        return [Category(id=r.id, name=r.name, description=r.description or "") for r in rows]

    # ------------------------------------------------------------------
    # Cart lines
    # ------------------------------------------------------------------

    def find_line(self, cart_id: str, pie_id: int) -> int | None:
        """Return the quantity of the line for ``(cart_id, pie_id)``, or None."""
        row = self.conn.execute(
            select(cart_lines.c.quantity).where(
                cart_lines.c.cart_id == cart_id,
                cart_lines.c.pie_id == pie_id,
            )
        ).first()
        return None if row is None else int(row.quantity)

    def increment_line(self, cart_id: str, pie_id: int, delta: int) -> None:
        """Adjust an existing line's quantity in place by *delta*."""
        self.conn.execute(
            update(cart_lines)
            .where(cart_lines.c.cart_id == cart_id, cart_lines.c.pie_id == pie_id)
            .values(quantity=cart_lines.c.quantity + delta)
        )

    def upsert_increment(self, cart_id: str, pie_id: int) -> int:
        """Create the line at quantity 1 or bump it by one, atomically.

        A single ``INSERT ... ON CONFLICT DO UPDATE`` statement, so two
        concurrent adds can neither duplicate the line nor lose an increment.
        Returns the line's new quantity.
        """
        stmt = sqlite_insert(cart_lines).values(cart_id=cart_id, pie_id=pie_id, quantity=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=[cart_lines.c.cart_id, cart_lines.c.pie_id],
            set_={"quantity": cart_lines.c.quantity + 1},
        )
        self.conn.execute(stmt)
        quantity = self.find_line(cart_id, pie_id)
        assert quantity is not None
        return quantity

    def delete_line(self, cart_id: str, pie_id: int) -> int:
        result = self.conn.execute(
            delete(cart_lines).where(
                cart_lines.c.cart_id == cart_id,
                cart_lines.c.pie_id == pie_id,
            )
        )
        return result.rowcount

    def delete_cart(self, cart_id: str) -> int:
        """Remove every line of a cart in one statement. Returns lines deleted."""
        result = self.conn.execute(delete(cart_lines).where(cart_lines.c.cart_id == cart_id))
        return result.rowcount

    def cart_lines(self, cart_id: str) -> list[CartLine]:
        """All lines of a cart joined with their pies, ordered by pie id."""
        rows = self.conn.execute(
            select(pies, cart_lines.c.quantity)
            .select_from(cart_lines.join(pies, cart_lines.c.pie_id == pies.c.id))
            .where(cart_lines.c.cart_id == cart_id)
            .order_by(pies.c.id)
        )
        return [
            CartLine(cart_id=cart_id, pie=_pie_from_row(row), quantity=row.quantity)
            for row in rows
        ]

    def cart_total_cents(self, cart_id: str) -> int:
        """Sum of ``price × quantity`` over a cart, evaluated by SQLite."""
        total = self.conn.execute(
            select(func.coalesce(func.sum(pies.c.price_cents * cart_lines.c.quantity), 0))
            .select_from(cart_lines.join(pies, cart_lines.c.pie_id == pies.c.id))
            .where(cart_lines.c.cart_id == cart_id)
        ).scalar_one()
        return int(total)


# ---------------------------------------------------------------------------
# Store: the repository
# ---------------------------------------------------------------------------


class Store:
    """Repository encapsulating database access for one shop directory.

    Constructed lazily by the CLI's ``AppContext`` from :class:`PieSettings`.
    Services receive the Store via their :class:`BaseService` constructor
    and never close it themselves.
    """

    def __init__(self, settings: PieSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            self.root, busy_timeout_ms=settings.store.busy_timeout_ms
        )
        self._event_bus: Any | None = None

    @property
    def root(self) -> Path:
        """The shop root directory."""
        return self._settings.shop_root

    @property
    def db_path(self) -> Path:
        return db_path_for(self.root)

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> PieSettings:
        return self._settings

    @property
    def event_bus(self) -> Any | None:
        """The plugin event bus (None if not initialized)."""
        return self._event_bus

    def init_event_bus(self) -> None:
        """Discover plugins and wire up the synchronous event bus."""
        from pieshop.plugins.event_bus import EventBus
        from pieshop.plugins.manager import PluginManager

        pm = PluginManager()
        if self._settings.plugins.enabled:
            pm.discover_and_load()
        self._event_bus = EventBus(pm)

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """One ``BEGIN IMMEDIATE`` transaction: commit on success, rollback on error.

        Usage::

            with store.transaction() as txn:
                txn.upsert_increment(cart_id, pie.id)
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
