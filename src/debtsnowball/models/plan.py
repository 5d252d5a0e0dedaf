"""Value objects produced by the payoff engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any

from ..money import round_currency


@dataclass(frozen=True, slots=True)
class DebtMonth:
    """One debt's ledger row within a simulated month."""

    id: str
    name: str
    starting_balance: float
    payment: float
    interest_paid: float
    principal_paid: float
    ending_balance: float
    is_completed: bool

    @classmethod
    def completed(cls, *, id: str, name: str) -> "DebtMonth":
        """Zeroed row for a debt that was already paid off."""
        return cls(
            id=id,
            name=name,
            starting_balance=0.0,
            payment=0.0,
            interest_paid=0.0,
            principal_paid=0.0,
            ending_balance=0.0,
            is_completed=True,
        )


@dataclass(frozen=True, slots=True)
class PaymentMonth:
    """All ledger rows for a single simulated calendar month."""

    month: int
    date: date
    debts: tuple[DebtMonth, ...]
    total_payment: float
    total_interest: float
    remaining_debts: int

    @property
    def ending_balance(self) -> float:
        return round_currency(sum(row.ending_balance for row in self.debts))


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Full snowball schedule plus aggregate totals."""

    payment_plan: tuple[PaymentMonth, ...]
    total_months: int
    total_interest: float
    total_paid: float
    debt_free_date: date
    start_date: date
    monthly_budget: float
    reached_ceiling: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping (dates as ISO strings)."""

        data = asdict(self)
        data["debt_free_date"] = self.debt_free_date.isoformat()
        data["start_date"] = self.start_date.isoformat()
        for month in data["payment_plan"]:
            month["date"] = month["date"].isoformat()
        return data


@dataclass(frozen=True, slots=True)
class DebtBaseline:
    """Minimum-only outcome for a single debt."""

    id: str
    name: str
    months: int
    interest_paid: float
    total_paid: float
    converges: bool = True


@dataclass(frozen=True, slots=True)
class MinimumOnlyResult:
    """Cost and duration of paying only minimums on every debt."""

    total_months: int
    total_interest: float
    total_paid: float
    debts: tuple[DebtBaseline, ...] = field(default_factory=tuple)

    @property
    def non_convergent(self) -> tuple[str, ...]:
        """Ids of debts whose minimum never outpaces interest."""
        return tuple(item.id for item in self.debts if not item.converges)

    @property
    def converges(self) -> bool:
        return all(item.converges for item in self.debts)
