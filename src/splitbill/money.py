from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Money = Union[Decimal, int, float, str]

ZERO = Decimal("0.00")
CENT = Decimal("0.01")

# Balances within one cent of zero count as settled.
SETTLEMENT_EPSILON = CENT


def to_money(value: Money) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() keeps 0.1 as "0.1" instead of its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def round2(value: Money) -> Decimal:
    """Round to the nearest cent, halves away from zero."""
    return to_money(value).quantize(CENT, rounding=ROUND_HALF_UP)
