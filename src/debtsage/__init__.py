"""DebtSage debt payoff planning engine."""

from __future__ import annotations

from .config import BaseConfig
from .models import Debt, LumpSum, PaymentInterval, Strategy
from .services.comparison import compare_strategies
from .services.debts import project_payoff, project_single_debt, simulate
from .services.summary import summarize_debts

__all__ = [
    "BaseConfig",
    "Debt",
    "LumpSum",
    "PaymentInterval",
    "Strategy",
    "compare_strategies",
    "project_payoff",
    "project_single_debt",
    "simulate",
    "summarize_debts",
]
