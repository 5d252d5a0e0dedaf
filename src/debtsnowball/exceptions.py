"""Domain-specific exceptions"""

from __future__ import annotations


class SnowballError(Exception):
    """Base exception for the payoff engine"""


class InsufficientBudgetError(SnowballError, ValueError):
    """Minimum payments due in a month exceed the monthly budget"""

    def __init__(self, *, month: int, minimum_total: float, monthly_budget: float) -> None:
        self.month = month
        self.minimum_total = minimum_total
        self.monthly_budget = monthly_budget
        super().__init__(
            f"Monthly budget {monthly_budget:.2f} does not cover minimum payments "
            f"of {minimum_total:.2f} (month {month})"
        )


class DocumentError(SnowballError, ValueError):
    """Imported debt document is malformed"""
