"""Snowball debt payoff calculator."""

from __future__ import annotations

import logging

from .config import BaseConfig, SimulationSettings
from .exceptions import DocumentError, InsufficientBudgetError, SnowballError
from .models import Debt, MinimumOnlyResult, PaymentMonth, SimulationResult
from .services.baseline import simulate_minimum_only
from .services.debts import simulate
from .services.ordering import avalanche_order, snowball_order

__all__ = [
    "BaseConfig",
    "Debt",
    "DocumentError",
    "InsufficientBudgetError",
    "MinimumOnlyResult",
    "PaymentMonth",
    "SimulationResult",
    "SimulationSettings",
    "SnowballError",
    "avalanche_order",
    "simulate",
    "simulate_minimum_only",
    "snowball_order",
]

logging.getLogger("debtsnowball").addHandler(logging.NullHandler())
