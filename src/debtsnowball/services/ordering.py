"""Attack-order policies for debt payoff.

Both policies return a new list and rely on ``sorted`` being stable, so debts
that tie keep the order the caller supplied them in.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from ..models.debt import Debt

OrderingPolicy = Callable[[Iterable[Debt]], list[Debt]]


def snowball_order(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts with the smallest balance first."""
    return sorted(debts, key=lambda d: d.balance)


def avalanche_order(debts: Iterable[Debt]) -> list[Debt]:
    """Return debts with the highest interest rate first."""
    return sorted(debts, key=lambda d: d.interest_rate, reverse=True)


STRATEGIES: dict[str, OrderingPolicy] = {
    "snowball": snowball_order,
    "avalanche": avalanche_order,
}


def get_strategy(name: str) -> OrderingPolicy:
    """Look up an ordering policy by name."""

    try:
        return STRATEGIES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Invalid debt payoff strategy: {name!r}.") from None


def strategy_names() -> Sequence[str]:
    return tuple(STRATEGIES)
