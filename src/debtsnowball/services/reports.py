"""Summaries derived from payoff schedules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..config import DEFAULT_SETTINGS
from ..models.debt import Debt
from ..models.plan import MinimumOnlyResult, PaymentMonth, SimulationResult
from ..money import round_currency


@dataclass(frozen=True, slots=True)
class PlanComparison:
    """Snowball outcome measured against paying minimums only."""

    savings: float
    time_saved: int
    interest_saved: float


@dataclass(frozen=True, slots=True)
class DebtCompletion:
    debt_id: str
    debt_name: str
    month: int
    date: date


@dataclass(frozen=True, slots=True)
class DebtTotals:
    debt_id: str
    debt_name: str
    total_paid: float
    total_interest: float


@dataclass(frozen=True, slots=True)
class DebtSummary:
    """Aggregate view of the debts entered by the user."""

    count: int
    total_balance: float
    total_minimum_payments: float
    average_rate: float


def compare_plans(snowball: SimulationResult, baseline: MinimumOnlyResult) -> PlanComparison:
    """Return money, months and interest saved by the snowball plan."""

    return PlanComparison(
        savings=round_currency(baseline.total_paid - snowball.total_paid),
        time_saved=baseline.total_months - snowball.total_months,
        interest_saved=round_currency(baseline.total_interest - snowball.total_interest),
    )


def debt_completions(plan: Iterable[PaymentMonth]) -> list[DebtCompletion]:
    """Return the month each debt was paid off, in payoff order."""

    completions: list[DebtCompletion] = []
    seen: set[str] = set()
    for month in plan:
        for row in month.debts:
            # Rows for debts closed in earlier months start at zero.
            if row.is_completed and row.starting_balance > 0 and row.id not in seen:
                seen.add(row.id)
                completions.append(
                    DebtCompletion(debt_id=row.id, debt_name=row.name, month=month.month, date=month.date)
                )
    return completions


def progress_percentage(plan: Iterable[PaymentMonth], total_debt: float) -> float:
    """Share of ``total_debt`` retired as principal across ``plan``."""

    if total_debt <= 0:
        return 0.0
    principal = sum(row.principal_paid for month in plan for row in month.debts)
    return principal / total_debt * 100


def debt_totals(plan: Sequence[PaymentMonth]) -> list[DebtTotals]:
    """Total paid and total interest per debt over the whole plan."""

    if not plan:
        return []
    totals: list[DebtTotals] = []
    for index, first_row in enumerate(plan[0].debts):
        rows = [month.debts[index] for month in plan]
        totals.append(
            DebtTotals(
                debt_id=first_row.id,
                debt_name=first_row.name,
                total_paid=round_currency(sum(row.payment for row in rows)),
                total_interest=round_currency(sum(row.interest_paid for row in rows)),
            )
        )
    return totals


def debt_summary(debts: Sequence[Debt]) -> DebtSummary:
    if not debts:
        return DebtSummary(count=0, total_balance=0.0, total_minimum_payments=0.0, average_rate=0.0)
    return DebtSummary(
        count=len(debts),
        total_balance=round_currency(sum(d.balance for d in debts)),
        total_minimum_payments=round_currency(sum(d.minimum_payment for d in debts)),
        average_rate=sum(d.interest_rate for d in debts) / len(debts),
    )


def plan_years(plan: Iterable[PaymentMonth]) -> list[int]:
    """Distinct calendar years covered by ``plan``, ascending."""
    return sorted({month.date.year for month in plan})


def filter_plan_by_year(plan: Iterable[PaymentMonth], year: int | None) -> list[PaymentMonth]:
    """Return the months falling in ``year`` (all months when ``year`` is None)."""

    if year is None:
        return list(plan)
    return [month for month in plan if month.date.year == year]


def format_duration(
    months: int, *, unfinished: bool = False, ceiling: int = DEFAULT_SETTINGS.max_months
) -> str:
    """Render a month count as "N years M months".

    ``unfinished`` marks a plan the ceiling cut short; it renders as
    "50+ years" whatever ``months`` holds.
    """

    if unfinished:
        if ceiling % 12:
            return f"{ceiling}+ months"
        return f"{ceiling // 12}+ years"
    years, remainder = divmod(max(months, 0), 12)
    parts = []
    if years:
        parts.append(f"{years} year{'s' if years != 1 else ''}")
    if remainder or not years:
        parts.append(f"{remainder} month{'s' if remainder != 1 else ''}")
    return " ".join(parts)
