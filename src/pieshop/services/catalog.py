"""CatalogService: read-only pie and category lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pieshop.services.base import BaseService
from pieshop.services.result import ServiceResult
from pieshop.services.telemetry import traced

if TYPE_CHECKING:
    from pieshop.domain.catalog import Pie


class CatalogService(BaseService):
    """Lists pies and categories; resolves pie ids for the cart."""

    def lookup(self, pie_id: int) -> Pie | None:
        """Resolve a pie id to its :class:`Pie`, or None."""
        with self._store.transaction() as txn:
            return txn.get_pie(pie_id)

    @traced
    def all_pies(self) -> ServiceResult:
        with self._store.transaction() as txn:
            found = txn.list_pies()
        items = [pie.to_summary() for pie in found]
        return ServiceResult(ok=True, op="list_pies", data={"items": items, "count": len(items)})

    @traced
    def pies_of_the_week(self) -> ServiceResult:
        """Pies featured this week (the home-page selection)."""
        with self._store.transaction() as txn:
            found = txn.list_pies(week_only=True)
        items = [pie.to_summary() for pie in found]
        return ServiceResult(
            ok=True, op="pies_of_the_week", data={"items": items, "count": len(items)}
        )

    @traced
    def get_pie(self, pie_id: int) -> ServiceResult:
        op = "get_pie"
        pie = self.lookup(pie_id)
        if pie is None:
            return ServiceResult.failure(op, "NOT_FOUND", f"No pie found with ID: {pie_id}")
        return ServiceResult(ok=True, op=op, data=pie.model_dump())

    @traced
    def categories(self) -> ServiceResult:
        with self._store.transaction() as txn:
            found = txn.list_categories()
        items = [category.model_dump() for category in found]
        return ServiceResult(
            ok=True, op="list_categories", data={"items": items, "count": len(items)}
        )
