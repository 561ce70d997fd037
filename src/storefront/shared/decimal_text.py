"""Exact decimal arithmetic over monetary amounts stored as text.

Amounts never pass through float: they are parsed into ``Decimal``, added,
and rendered back in fixed-point notation.
"""

from decimal import Decimal


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr instead of binary noise
    return Decimal(str(value))


def to_text(value) -> str:
    return format(to_decimal(value), "f")


def line_amount(price, qty: int) -> Decimal:
    """``price × qty`` for a line of ``qty`` units."""
    return to_decimal(price) * qty


def add_to_total(base: str, delta) -> str:
    """Add a signed ``delta`` to the decimal text ``base``.

    ``base`` must be well-formed decimal text; a malformed value raises
    ``decimal.InvalidOperation``.
    """
    return to_text(Decimal(base) + to_decimal(delta))
