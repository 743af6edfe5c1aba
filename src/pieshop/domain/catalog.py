"""Catalog models: categories and pies.

Read-only from the cart's perspective: the cart engine only ever needs a
pie's id and price, plus its display fields when listing a cart.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class Category(BaseModel):
    """A pie category (fruit pies, cheese cakes, ...)."""

    model_config = {"frozen": True}

    id: int
    name: str
    description: str = ""


class Pie(BaseModel):
    """A product in the shop."""

    model_config = {"frozen": True}

    id: int
    name: str
    price: Decimal
    short_description: str = ""
    long_description: str = ""
    allergy_information: str = ""
    image_url: str = ""
    image_thumbnail_url: str = ""
    is_pie_of_the_week: bool = False
    in_stock: bool = True
    category_id: int | None = None

    def to_summary(self) -> dict[str, object]:
        """Compact dict used in listings and result payloads."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "in_stock": self.in_stock,
            "is_pie_of_the_week": self.is_pie_of_the_week,
        }
