"""Currency rounding shared by the engine and its reports."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = "0.01"


def round_currency(amount: float, cent: str = CENT) -> float:
    """Round to cents using half-up rounding."""

    # repr() keeps 2.675 as "2.675" instead of its binary expansion
    return float(Decimal(repr(amount)).quantize(Decimal(cent), rounding=ROUND_HALF_UP))
