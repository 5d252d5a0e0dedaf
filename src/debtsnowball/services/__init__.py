"""Service module exports."""

from . import baseline, debts, exchange, ordering, reports

__all__ = [
    "baseline",
    "debts",
    "exchange",
    "ordering",
    "reports",
]
