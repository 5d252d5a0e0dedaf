"""Pytest configuration and shared fixtures for debtsnowball tests.

Provides debt factories, a fixed simulation start date and helper utilities
for checking ledger arithmetic.
"""

from __future__ import annotations

from datetime import date

import pytest

from debtsnowball.config import SimulationSettings
from debtsnowball.models import Debt

START = date(2024, 1, 15)


# =============================================================================
# Debt Fixtures
# =============================================================================


@pytest.fixture
def start_date() -> date:
    """Nominal start date so schedules are reproducible."""
    return START


@pytest.fixture
def settings() -> SimulationSettings:
    return SimulationSettings()


@pytest.fixture
def debt_factory():
    """Factory for creating validated debts.

    Returns:
        Callable: Function that creates Debt instances with sensible defaults
    """

    counter = {"value": 0}

    def _create_debt(
        name: str | None = None,
        balance: float = 1000.00,
        interest_rate: float = 18.0,
        minimum_payment: float = 25.00,
        id: str | None = None,
        start_date: date = START,
    ) -> Debt:
        counter["value"] += 1
        return Debt(
            id=id or f"debt-{counter['value']}",
            name=name or f"Debt {counter['value']}",
            balance=balance,
            interest_rate=interest_rate,
            minimum_payment=minimum_payment,
            start_date=start_date,
        )

    return _create_debt


@pytest.fixture
def closed_debt():
    """Debt that is already paid off; bypasses validation like a stale snapshot."""

    return Debt.model_construct(
        id="closed",
        name="Closed Card",
        balance=0.0,
        interest_rate=12.0,
        minimum_payment=25.0,
        start_date=START,
    )


@pytest.fixture
def card_debts(debt_factory):
    """Three debts with uneven balances and rates."""

    return [
        debt_factory(id="car", name="Car Loan", balance=8000.00, interest_rate=6.5, minimum_payment=220.00),
        debt_factory(id="card", name="Credit Card", balance=1500.00, interest_rate=22.9, minimum_payment=45.00),
        debt_factory(id="medical", name="Medical", balance=600.00, interest_rate=0.0, minimum_payment=30.00),
    ]


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
