"""Model exports."""

from .debt import Debt
from .plan import DebtBaseline, DebtMonth, MinimumOnlyResult, PaymentMonth, SimulationResult

__all__ = [
    "Debt",
    "DebtBaseline",
    "DebtMonth",
    "MinimumOnlyResult",
    "PaymentMonth",
    "SimulationResult",
]
