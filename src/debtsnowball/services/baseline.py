"""Minimum-payments-only baseline used for savings comparisons."""

from __future__ import annotations

import math
from typing import Iterable

from ..config import DEFAULT_SETTINGS, SimulationSettings
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.plan import DebtBaseline, MinimumOnlyResult

logger = get_logger("services.baseline")


def amortize_minimum_only(debt: Debt, *, settings: SimulationSettings | None = None) -> DebtBaseline:
    """Amortize one debt under its own minimum payment.

    Amounts are kept at full precision; nothing is rounded to cents because no
    ledger rows are produced. A minimum that never exceeds the monthly interest
    marks the debt as non-convergent and pins its month count at the ceiling.
    """

    settings = settings or DEFAULT_SETTINGS
    balance = float(debt.balance)
    minimum_payment = float(debt.minimum_payment)
    monthly_rate = float(debt.monthly_rate)

    if monthly_rate == 0:
        return DebtBaseline(
            id=debt.id,
            name=debt.name,
            months=math.ceil(balance / minimum_payment),
            interest_paid=0.0,
            total_paid=balance,
        )

    months = 0
    interest_paid = 0.0
    converges = True
    while balance > settings.epsilon and months < settings.max_months:
        interest_payment = balance * monthly_rate
        principal_payment = max(0.0, minimum_payment - interest_payment)
        if principal_payment <= 0:
            months = settings.max_months
            converges = False
            logger.warning(
                "Minimum payment never covers interest",
                extra={"debt_id": debt.id, "minimum_payment": minimum_payment, "interest": interest_payment},
            )
            break
        balance -= principal_payment
        interest_paid += interest_payment
        months += 1

    return DebtBaseline(
        id=debt.id,
        name=debt.name,
        months=months,
        interest_paid=interest_paid,
        total_paid=float(debt.balance) + interest_paid,
        converges=converges,
    )


def simulate_minimum_only(
    debts: Iterable[Debt], *, settings: SimulationSettings | None = None
) -> MinimumOnlyResult:
    """Return how long and how much paying only minimums would take.

    Debts are amortized independently; the basket is finished when its
    slowest debt is, so ``total_months`` is the maximum per-debt count.
    """

    settings = settings or DEFAULT_SETTINGS
    outcomes: list[DebtBaseline] = []
    for debt in debts:
        if debt.balance == 0 or debt.minimum_payment == 0:
            continue
        outcomes.append(amortize_minimum_only(debt, settings=settings))

    return MinimumOnlyResult(
        total_months=max((item.months for item in outcomes), default=0),
        total_interest=sum(item.interest_paid for item in outcomes),
        total_paid=sum(item.total_paid for item in outcomes),
        debts=tuple(outcomes),
    )
