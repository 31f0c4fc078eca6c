"""Roll a simulated schedule up into reported totals."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Hashable, Iterable, Sequence

from ..models.projection import DebtPayoff, MonthlyProjection, ProjectionResult
from ..models.strategy import Strategy

CENT = Decimal("0.01")


def round_currency(amount: Decimal) -> Decimal:
    """Round to cents, half-up. Only applied to reported totals."""

    if not amount.is_finite():
        return amount
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def aggregate(
    schedule: Sequence[MonthlyProjection],
    *,
    strategy: Strategy | str,
    cleared: bool,
    months_per_period: int = 1,
    payoff_order: Iterable[DebtPayoff] = (),
    non_amortizing_debt_ids: Iterable[Hashable] = (),
    warnings: Iterable[str] = (),
) -> ProjectionResult:
    """Summarise a schedule into a :class:`ProjectionResult`.

    ``debt_free_date`` is the key of the last period when every debt was
    cleared, and ``None`` when the run stopped at the period cap (or never
    simulated a period). ``months_to_payoff`` converts the period count to
    calendar months with ``months_per_period``.
    """

    total_interest = Decimal(0)
    total_paid = Decimal(0)
    for period in schedule:
        for payment in period.payments:
            total_interest += payment.interest
            total_paid += payment.payment

    debt_free_date = schedule[-1].period_key if cleared and schedule else None

    return ProjectionResult(
        strategy=Strategy.parse(strategy),
        schedule=tuple(schedule),
        total_interest_paid=round_currency(total_interest),
        total_paid=round_currency(total_paid),
        debt_free_date=debt_free_date,
        months_to_payoff=len(schedule) * months_per_period,
        payoff_order=tuple(payoff_order),
        non_amortizing_debt_ids=tuple(non_amortizing_debt_ids),
        warnings=tuple(warnings),
    )


def empty_projection(strategy: Strategy | str) -> ProjectionResult:
    """The "no debts" result: nothing scheduled and nothing owed."""

    return aggregate((), strategy=strategy, cleared=True)


__all__ = ["CENT", "aggregate", "empty_projection", "round_currency"]
