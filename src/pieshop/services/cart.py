"""CartService: the cart engine.

Every operation is scoped by an explicit ``cart_id`` and runs as one
store transaction that commits before the result is returned.

Adds are a single atomic upsert per ``(cart_id, pie_id)``; removals read
and then write under the ``BEGIN IMMEDIATE`` write lock. Neither can
duplicate a line or lose an update when requests race.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pieshop.domain.money import cents_to_decimal
from pieshop.services.base import BaseService
from pieshop.services.result import ServiceResult
from pieshop.services.telemetry import get_current_span, trace_span, traced

if TYPE_CHECKING:
    from pieshop.domain.catalog import Pie

log = structlog.get_logger(__name__)


class CartService(BaseService):
    """Add, remove, list, total and clear cart lines."""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @traced
    def add_item(self, pie: Pie, cart_id: str) -> ServiceResult:
        """Put one more *pie* in the cart: create the line at 1 or increment it.

        Stock is not checked here; any pie the store knows about is accepted.
        """
        op = "add_item"
        warnings: list[str] = []

        with self._store.transaction() as txn:
            quantity = txn.upsert_increment(cart_id, pie.id)

        span = get_current_span()
        if span is not None:
            span.annotate("pie_id", pie.id)
            span.annotate("quantity", quantity)

        log.debug("cart.add_item", cart_id=cart_id, pie_id=pie.id, quantity=quantity)
        self._dispatch_event(
            "post_cart_add",
            {"cart_id": cart_id, "pie_id": pie.id, "quantity": quantity},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"cart_id": cart_id, "pie_id": pie.id, "name": pie.name, "quantity": quantity},
            warnings=warnings,
        )

    @traced
    def remove_item(self, pie: Pie, cart_id: str) -> ServiceResult:
        """Take one *pie* out of the cart.

        ``data["quantity"]`` is the line's new quantity: the decremented
        value, or 0 when the line was deleted or was never there.
        """
        op = "remove_item"
        warnings: list[str] = []
        removed = False

        with self._store.transaction() as txn:
            current = txn.find_line(cart_id, pie.id)
            if current is None:
                quantity = 0
            elif current > 1:
                txn.increment_line(cart_id, pie.id, -1)
                quantity = current - 1
            else:
                txn.delete_line(cart_id, pie.id)
                quantity = 0
                removed = True

        span = get_current_span()
        if span is not None:
            span.annotate("pie_id", pie.id)
            span.annotate("quantity", quantity)

        if current is not None:
            log.debug(
                "cart.remove_item",
                cart_id=cart_id,
                pie_id=pie.id,
                quantity=quantity,
                removed=removed,
            )
            self._dispatch_event(
                "post_cart_remove",
                {"cart_id": cart_id, "pie_id": pie.id, "quantity": quantity},
                warnings,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "cart_id": cart_id,
                "pie_id": pie.id,
                "name": pie.name,
                "quantity": quantity,
                "removed": removed,
            },
            warnings=warnings,
        )

    @traced
    def clear(self, cart_id: str) -> ServiceResult:
        """Delete every line of the cart in one statement. Idempotent."""
        op = "clear"
        warnings: list[str] = []

        with self._store.transaction() as txn:
            removed = txn.delete_cart(cart_id)

        if removed:
            log.debug("cart.clear", cart_id=cart_id, removed=removed)
            self._dispatch_event(
                "post_cart_clear", {"cart_id": cart_id, "removed": removed}, warnings
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"cart_id": cart_id, "removed": removed},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @traced
    def list_items(self, cart_id: str) -> ServiceResult:
        """Every line of the cart with its pie, ordered by pie id.

        Recomputed on every call; nothing is memoised on the service.
        """
        with self._store.transaction() as txn:
            lines = txn.cart_lines(cart_id)

        items = [line.to_dict() for line in lines]
        return ServiceResult(
            ok=True,
            op="list_items",
            data={"cart_id": cart_id, "items": items, "count": len(items)},
        )

    @traced
    def total(self, cart_id: str) -> ServiceResult:
        """Sum of ``price × quantity`` computed by the store. Empty cart: 0.00."""
        with self._store.transaction() as txn:
            cents = txn.cart_total_cents(cart_id)

        return ServiceResult(
            ok=True,
            op="total",
            data={
                "cart_id": cart_id,
                "total": cents_to_decimal(cents),
                "currency": self._store.settings.shop.currency,
            },
        )

    @traced
    def summary(self, cart_id: str) -> ServiceResult:
        """Listing and store-computed total read in one transaction."""
        with self._store.transaction() as txn:
            with trace_span("cart_lines"):
                lines = txn.cart_lines(cart_id)
            with trace_span("cart_total"):
                cents = txn.cart_total_cents(cart_id)

        items = [line.to_dict() for line in lines]
        return ServiceResult(
            ok=True,
            op="cart_summary",
            data={
                "cart_id": cart_id,
                "items": items,
                "count": len(items),
                "quantity": sum(line.quantity for line in lines),
                "total": cents_to_decimal(cents),
                "currency": self._store.settings.shop.currency,
            },
        )
