"""Cart identifiers.

A cart id is an opaque UUID4 string minted once per visitor session.
INVARIANT: a cart id never changes for the lifetime of its session.
"""

from __future__ import annotations

import re
import uuid

CART_ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def generate_cart_id() -> str:
    """Mint a new globally-unique cart id."""
    return str(uuid.uuid4())


def validate_cart_id(cart_id: str) -> bool:
    """Check whether *cart_id* looks like an id minted by :func:`generate_cart_id`.

    Ids are opaque to the cart engine; this is only used for diagnostics.
    """
    return CART_ID_PATTERN.match(cart_id) is not None
