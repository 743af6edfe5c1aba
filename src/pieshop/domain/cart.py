"""Cart line model.

A cart is not stored as an entity of its own: it is the set of lines
sharing a ``cart_id``. (cart_id, pie.id) is unique and ``quantity >= 1``.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from pieshop.domain.catalog import Pie


class CartLine(BaseModel):
    """One distinct pie within one cart, resolved with its pie."""

    model_config = {"frozen": True}

    cart_id: str
    pie: Pie
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> Decimal:
        return self.pie.price * self.quantity

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.pie.id,
            "name": self.pie.name,
            "price": self.pie.price,
            "quantity": self.quantity,
            "line_total": self.line_total,
        }
