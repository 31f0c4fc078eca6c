"""Value objects for DebtSage."""

from .debt import Debt, LumpSum, PaymentInterval
from .projection import (
    DebtPayment,
    DebtPayoff,
    MonthlyProjection,
    ProjectionResult,
    Recommendation,
    SinglePayoffProjection,
    StrategyComparison,
)
from .strategy import Strategy

__all__ = [
    "Debt",
    "DebtPayment",
    "DebtPayoff",
    "LumpSum",
    "MonthlyProjection",
    "PaymentInterval",
    "ProjectionResult",
    "Recommendation",
    "SinglePayoffProjection",
    "Strategy",
    "StrategyComparison",
]
