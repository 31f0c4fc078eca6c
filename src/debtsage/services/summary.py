"""Portfolio-level debt totals for dashboards and reports."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..models.debt import Debt
from .projections import round_currency


@dataclass(frozen=True, slots=True)
class DebtSummary:
    total_debts: int
    active_debts: int
    paid_off_debts: int
    total_original_debt: Decimal
    total_current_debt: Decimal
    total_minimum_payments: Decimal
    debt_reduction_percentage: Decimal


def summarize_debts(debts: Iterable[Debt]) -> DebtSummary:
    """Summarise balances, minimums and overall progress.

    Debts with a zero balance count as paid off; their minimums are excluded
    from the monthly total.
    """

    debts = list(debts)
    active = [d for d in debts if d.balance > 0]

    total_original = sum((d.original_amount for d in debts), Decimal(0))
    total_current = sum((d.balance for d in active), Decimal(0))
    total_minimums = sum((d.minimum_payment for d in active), Decimal(0))

    reduction = Decimal(0)
    if total_original > 0:
        reduction = (total_original - total_current) / total_original * Decimal(100)

    return DebtSummary(
        total_debts=len(debts),
        active_debts=len(active),
        paid_off_debts=len(debts) - len(active),
        total_original_debt=round_currency(total_original),
        total_current_debt=round_currency(total_current),
        total_minimum_payments=round_currency(total_minimums),
        debt_reduction_percentage=round_currency(reduction),
    )


__all__ = ["DebtSummary", "summarize_debts"]
