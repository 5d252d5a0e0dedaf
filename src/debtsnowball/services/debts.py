"""Snowball payoff simulator."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Any, Iterable

from ..config import DEFAULT_SETTINGS, SimulationSettings
from ..exceptions import InsufficientBudgetError
from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.plan import DebtMonth, PaymentMonth, SimulationResult
from ..money import round_currency
from .ordering import OrderingPolicy, snowball_order

logger = get_logger("services.debts")


def calculate_monthly_interest(balance: float, annual_rate: float) -> float:
    """Interest accrued in one month on ``balance`` at an annual percentage rate."""
    return balance * (annual_rate / 100) / 12


def add_months(value: date, months: int) -> date:
    """Advance ``value`` by whole calendar months, clamping the day to month end."""

    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _working_copies(debts: Iterable[Debt]) -> list[dict[str, Any]]:
    # Plain dicts so the caller's Debt objects are never touched.
    return [
        {
            "id": debt.id,
            "name": debt.name,
            "balance": float(debt.balance),
            "interest_rate": float(debt.interest_rate),
            "minimum_payment": float(debt.minimum_payment),
        }
        for debt in debts
    ]


def _empty_result(*, start: date, monthly_budget: float) -> SimulationResult:
    return SimulationResult(
        payment_plan=(),
        total_months=0,
        total_interest=0.0,
        total_paid=0.0,
        debt_free_date=start,
        start_date=start,
        monthly_budget=monthly_budget,
    )


def simulate(
    debts: Iterable[Debt],
    monthly_budget: float,
    *,
    start_date: date | None = None,
    settings: SimulationSettings | None = None,
    order: OrderingPolicy = snowball_order,
) -> SimulationResult:
    """Simulate paying ``debts`` down with a fixed ``monthly_budget``.

    Every open debt receives its minimum payment each month. Whatever is left
    of the budget goes to the first open debt in attack order; when that debt
    is paid off the surplus rolls onto the next open debt within the same
    month. Surplus freed by a debt later in the order goes back to the
    earliest debt that is still open, so the whole budget is spent while any
    debt remains. Attack order is computed once, up front, and not re-ranked
    as balances change.

    Raises:
        InsufficientBudgetError: the minimums of the open debts exceed the
            budget in some month. No partial plan is returned.
    """

    settings = settings or DEFAULT_SETTINGS
    start = start_date or date.today()
    debts = list(debts)
    if not debts or monthly_budget <= 0:
        return _empty_result(start=start, monthly_budget=monthly_budget)

    cent = settings.cent
    working = _working_copies(order(debts))
    payment_plan: list[PaymentMonth] = []
    total_interest = 0.0
    total_paid = 0.0
    month = 0

    logger.debug(
        "Starting snowball simulation",
        extra={"debt_count": len(working), "monthly_budget": monthly_budget},
    )

    while any(d["balance"] > 0 for d in working) and month < settings.max_months:
        month += 1
        open_debts = [d for d in working if d["balance"] > 0]
        minimum_total = round_currency(sum(d["minimum_payment"] for d in open_debts), cent)
        if minimum_total > monthly_budget:
            logger.warning(
                "Budget does not cover minimum payments",
                extra={"month": month, "minimum_total": minimum_total, "monthly_budget": monthly_budget},
            )
            raise InsufficientBudgetError(
                month=month, minimum_total=minimum_total, monthly_budget=monthly_budget
            )

        extra = monthly_budget - minimum_total
        booked: list[dict[str, Any] | DebtMonth] = []

        for debt in working:
            if debt["balance"] <= 0:
                booked.append(DebtMonth.completed(id=debt["id"], name=debt["name"]))
                continue

            interest_paid = round_currency(
                calculate_monthly_interest(debt["balance"], debt["interest_rate"]), cent
            )
            payment = debt["minimum_payment"]
            if extra > 0:
                payment += extra
                extra = 0.0

            # Cap at the payoff amount and hand the surplus to the next debt
            payoff_amount = round_currency(debt["balance"] + interest_paid, cent)
            if payment > payoff_amount:
                extra += payment - payoff_amount
                payment = payoff_amount
            booked.append(
                {"debt": debt, "interest_paid": interest_paid, "payment": payment, "payoff": payoff_amount}
            )

        # Surplus freed behind the target goes back to the earliest open debt
        for entry in booked:
            if extra <= 0:
                break
            if isinstance(entry, DebtMonth) or entry["payment"] >= entry["payoff"]:
                continue
            top_up = min(extra, entry["payoff"] - entry["payment"])
            entry["payment"] += top_up
            extra -= top_up

        rows: list[DebtMonth] = []
        month_payment = 0.0
        month_interest = 0.0
        for entry in booked:
            if isinstance(entry, DebtMonth):
                rows.append(entry)
                continue

            debt = entry["debt"]
            starting_balance = debt["balance"]
            interest_paid = entry["interest_paid"]
            payment = round_currency(entry["payment"], cent)
            principal_paid = round_currency(payment - interest_paid, cent)
            ending_balance = round_currency(max(0.0, starting_balance - principal_paid), cent)
            debt["balance"] = ending_balance

            rows.append(
                DebtMonth(
                    id=debt["id"],
                    name=debt["name"],
                    starting_balance=starting_balance,
                    payment=payment,
                    interest_paid=interest_paid,
                    principal_paid=principal_paid,
                    ending_balance=ending_balance,
                    is_completed=ending_balance == 0,
                )
            )
            month_payment += payment
            month_interest += interest_paid

        total_paid += month_payment
        total_interest += month_interest
        payment_plan.append(
            PaymentMonth(
                month=month,
                date=add_months(start, month - 1),
                debts=tuple(rows),
                total_payment=round_currency(month_payment, cent),
                total_interest=round_currency(month_interest, cent),
                remaining_debts=len(open_debts),
            )
        )

    reached_ceiling = any(d["balance"] > 0 for d in working)
    if reached_ceiling:
        logger.warning(
            "Simulation stopped at safety ceiling",
            extra={"max_months": settings.max_months},
        )

    result = SimulationResult(
        payment_plan=tuple(payment_plan),
        total_months=month,
        total_interest=round_currency(total_interest, cent),
        total_paid=round_currency(total_paid, cent),
        debt_free_date=add_months(start, month),
        start_date=start,
        monthly_budget=monthly_budget,
        reached_ceiling=reached_ceiling,
    )
    logger.info(
        "Snowball simulation complete",
        extra={"total_months": result.total_months, "total_interest": result.total_interest},
    )
    return result
