"""Debt entity accepted by the payoff engine."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

from pydantic import field_validator, model_validator
from sqlmodel import Field, SQLModel

MAX_BALANCE = 999_999_999
MAX_NAME_LENGTH = 100
MAX_INTEREST_RATE = 100.0


def _new_debt_id() -> str:
    return uuid4().hex


class Debt(SQLModel):
    """Installment or revolving debt entered by the user.

    Construction validates the record the same way the entry form does, so a
    malformed import is rejected before it ever reaches the simulator.
    ``start_date`` is informational; the simulation clock ignores it.
    """

    id: str = Field(default_factory=_new_debt_id, min_length=1)
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    balance: float = Field(gt=0, le=MAX_BALANCE)
    interest_rate: float = Field(default=0.0, ge=0, le=MAX_INTEREST_RATE)
    minimum_payment: float = Field(gt=0)
    start_date: date = Field(default_factory=date.today)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @model_validator(mode="after")
    def _minimum_within_balance(self) -> "Debt":
        if self.minimum_payment > self.balance:
            raise ValueError("minimum_payment cannot exceed balance")
        return self

    @property
    def monthly_rate(self) -> float:
        """Return the monthly interest rate as a fraction."""
        return self.interest_rate / 100 / 12
