"""Fixed-point money helpers.

Prices are persisted as integer cents so that SQL aggregates stay exact,
and surfaced to callers as two-place :class:`~decimal.Decimal` values.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def cents_to_decimal(cents: int | None) -> Decimal:
    """Convert integer cents to a two-place Decimal (``None`` -> 0.00).

    Examples:
        >>> cents_to_decimal(1595)
        Decimal('15.95')
        >>> cents_to_decimal(None)
        Decimal('0.00')
    """
    if cents is None:
        return ZERO
    return (Decimal(int(cents)) / 100).quantize(CENT)


def decimal_to_cents(amount: Decimal | str | int) -> int:
    """Convert a decimal amount to integer cents, rounding half up.

    Examples:
        >>> decimal_to_cents(Decimal("18.95"))
        1895
        >>> decimal_to_cents("12.955")
        1296
    """
    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(value * 100)
