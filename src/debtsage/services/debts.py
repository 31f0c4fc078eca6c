"""Debt payoff simulation (snowball, avalanche, custom and minimum-only).

The loop advances one calendar month per period. Monthly debts are billed
every period; half-yearly and yearly debts are billed every 6 and 12 periods
(starting with the first), accruing a full interval of interest when billed.
The monthly extra budget always goes to the top-priority debt, billed or not,
and is applied straight to principal when that debt has no bill that month.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Hashable, Iterable

from ..config import DEFAULT_MAX_PERIODS
from ..logging_config import get_logger
from ..models.debt import Debt, LumpSum, to_decimal
from ..models.projection import (
    INFINITE,
    DebtPayment,
    DebtPayoff,
    MonthlyProjection,
    ProjectionResult,
    SinglePayoffProjection,
)
from ..models.strategy import Strategy
from ..periods import add_months, coerce_period, period_key
from .allocation import allocate_payments
from .amortization import amortize, period_rate
from .projections import aggregate, empty_projection, round_currency
from .strategies import sort_debts

logger = get_logger(__name__)

MAX_PERIODS = DEFAULT_MAX_PERIODS
LOW_PAYMENT_WARNING = "Payment amount is too low to cover interest charges"


class SimulationState(str, Enum):
    RUNNING = "running"
    ALL_DEBTS_CLEARED = "all_debts_cleared"
    CAP_REACHED = "cap_reached"


@dataclass(frozen=True, slots=True)
class SimulationRun:
    """Raw output of the simulation loop, before aggregation."""

    strategy: Strategy
    state: SimulationState
    schedule: tuple[MonthlyProjection, ...]
    payoff_order: tuple[DebtPayoff, ...]
    non_amortizing_debt_ids: tuple[Hashable, ...]


def _prepare_debts(debts: Iterable[Debt]) -> list[Debt]:
    """Validate the input shape and return a private list of records."""

    prepared: list[Debt] = []
    seen: set[Hashable] = set()
    for debt in debts:
        if not isinstance(debt, Debt):
            raise TypeError(f"Expected Debt records, got {type(debt).__name__}")
        if debt.id in seen:
            raise ValueError(f"Duplicate debt id {debt.id!r}")
        seen.add(debt.id)
        prepared.append(debt)
    return prepared


def _lump_sums_by_period(lump_sums: Iterable[LumpSum]) -> dict[str, Decimal]:
    """Group lump sums by their period key."""

    mapping: dict[str, Decimal] = {}
    for lump in lump_sums:
        if not isinstance(lump, LumpSum):
            raise TypeError(f"Expected LumpSum records, got {type(lump).__name__}")
        mapping[lump.period_key] = mapping.get(lump.period_key, Decimal(0)) + lump.amount
    return mapping


def _is_due(debt: Debt, period_index: int) -> bool:
    return period_index % debt.payment_intervals_per_year.months == 0


def simulate(
    debts: Iterable[Debt],
    strategy: Strategy | str,
    monthly_extra: Decimal | int | float | str,
    start: date | str,
    lump_sums: Iterable[LumpSum] = (),
    *,
    max_periods: int = MAX_PERIODS,
) -> SimulationRun:
    """Run the month-by-month payoff loop until every debt clears or the cap hits.

    Each period re-sorts the debts still carrying a balance, offers every
    billed debt its minimum, adds the period's extra (``monthly_extra`` plus
    any lump sums keyed to that month) to the first debt in priority order and
    amortizes. Balances live in a fresh snapshot per period; the ``Debt``
    records passed in are never modified.
    """

    strategy = Strategy.parse(strategy)
    snapshot = _prepare_debts(debts)
    base_extra = to_decimal(monthly_extra, field_name="monthly_extra")
    if base_extra < 0:
        raise ValueError("monthly_extra must not be negative")
    if max_periods <= 0:
        raise ValueError("max_periods must be positive")
    lump_map = _lump_sums_by_period(lump_sums)
    current = coerce_period(start)

    balances: dict[Hashable, Decimal] = {debt.id: debt.balance for debt in snapshot}
    schedule: list[MonthlyProjection] = []
    payoff_order: list[DebtPayoff] = []
    non_amortizing: list[Hashable] = []
    state = SimulationState.RUNNING

    logger.debug(
        "Starting payoff simulation",
        extra={"strategy": strategy.value, "debts": len(snapshot), "start": period_key(current)},
    )

    period_index = 0
    while state is SimulationState.RUNNING:
        active = [
            replace(debt, balance=balances[debt.id]) for debt in snapshot if balances[debt.id] > 0
        ]
        if not active:
            state = SimulationState.ALL_DEBTS_CLEARED
            break
        if period_index >= max_periods:
            state = SimulationState.CAP_REACHED
            break

        key = period_key(current)
        available_extra = base_extra + lump_map.get(key, Decimal(0))
        ordered = sort_debts(active, strategy)
        due_ids = {debt.id for debt in ordered if _is_due(debt, period_index)}
        offered = allocate_payments(ordered, available_extra, due_ids=due_ids)

        next_balances = dict(balances)
        rows: list[DebtPayment] = []
        for debt in ordered:
            if debt.id not in offered:
                continue
            billed = debt.id in due_ids
            row = amortize(debt, offered[debt.id], period_rate(debt) if billed else Decimal(0))
            rows.append(row)
            next_balances[debt.id] = row.remaining_balance

            if billed and row.principal <= 0 and offered[debt.id] == debt.minimum_payment:
                if debt.id not in non_amortizing:
                    non_amortizing.append(debt.id)
                    logger.warning(
                        "Minimum payment does not cover interest",
                        extra={"debt_id": str(debt.id), "period": key},
                    )
            if row.remaining_balance <= 0:
                payoff_order.append(
                    DebtPayoff(debt_id=debt.id, period_key=key, months=period_index + 1)
                )

        schedule.append(
            MonthlyProjection.from_payments(key, tuple(rows), available_extra=available_extra)
        )
        balances = next_balances
        period_index += 1
        current = add_months(current, 1)

    if state is SimulationState.CAP_REACHED:
        logger.warning(
            "Payoff simulation hit the period cap",
            extra={"strategy": strategy.value, "max_periods": max_periods},
        )

    return SimulationRun(
        strategy=strategy,
        state=state,
        schedule=tuple(schedule),
        payoff_order=tuple(payoff_order),
        non_amortizing_debt_ids=tuple(non_amortizing),
    )


def project_payoff(
    debts: Iterable[Debt],
    strategy: Strategy | str,
    monthly_extra: Decimal | int | float | str,
    start: date | str,
    lump_sums: Iterable[LumpSum] = (),
    *,
    max_periods: int = MAX_PERIODS,
) -> ProjectionResult:
    """Simulate and aggregate in one call.

    An empty debt list yields the zero-valued "no debts" projection.
    """

    debts = list(debts)
    if not debts:
        return empty_projection(strategy)

    run = simulate(debts, strategy, monthly_extra, start, lump_sums, max_periods=max_periods)
    warnings: list[str] = []
    for debt_id in run.non_amortizing_debt_ids:
        warnings.append(f"Minimum payment for debt {debt_id} does not cover its interest")
    if run.state is SimulationState.CAP_REACHED:
        warnings.append(f"Debts are not paid off within {max_periods} months")

    return aggregate(
        run.schedule,
        strategy=run.strategy,
        cleared=run.state is SimulationState.ALL_DEBTS_CLEARED,
        payoff_order=run.payoff_order,
        non_amortizing_debt_ids=run.non_amortizing_debt_ids,
        warnings=warnings,
    )


def project_single_debt(
    debt: Debt,
    start: date | str,
    payment: Decimal | int | float | str | None = None,
    *,
    max_periods: int = MAX_PERIODS,
) -> SinglePayoffProjection:
    """Project payoff of one debt at a fixed payment per billing interval.

    ``payment`` defaults to the debt's minimum. When it does not exceed the
    first interval's interest the debt can never be repaid, so an infinite
    projection with a warning is returned without simulating.

    ``max_periods`` counts calendar months, so a yearly debt is allowed
    ``max_periods // 12`` payments.
    """

    if not isinstance(debt, Debt):
        raise TypeError(f"Expected a Debt record, got {type(debt).__name__}")
    amount = debt.minimum_payment if payment is None else to_decimal(payment, field_name="payment")
    first_period = coerce_period(start)
    interval_months = debt.payment_intervals_per_year.months

    if debt.balance <= 0:
        return SinglePayoffProjection(
            debt_id=debt.id,
            payment=amount,
            intervals_to_payoff=0,
            months_to_payoff=0,
            total_interest_paid=Decimal("0.00"),
            total_amount_paid=round_currency(max(debt.original_amount - debt.balance, Decimal(0))),
            payoff_date=None,
        )

    rate = period_rate(debt)
    if amount <= debt.balance * rate:
        logger.info(
            "Single-debt payoff never converges",
            extra={"debt_id": str(debt.id), "payment": str(amount)},
        )
        return SinglePayoffProjection(
            debt_id=debt.id,
            payment=amount,
            intervals_to_payoff=math.inf,
            months_to_payoff=math.inf,
            total_interest_paid=INFINITE,
            total_amount_paid=INFINITE,
            payoff_date=None,
            warning=LOW_PAYMENT_WARNING,
        )

    max_intervals = max(1, max_periods // interval_months)
    rows: list[DebtPayment] = []
    current = debt
    while current.balance > 0 and len(rows) < max_intervals:
        row = amortize(current, amount, rate)
        rows.append(row)
        current = replace(current, balance=row.remaining_balance)

    intervals = len(rows)
    cleared = current.balance <= 0
    payoff_date = None
    warning = None
    if cleared:
        payoff_date = period_key(add_months(first_period, (intervals - 1) * interval_months))
    else:
        warning = f"Debt is not paid off within {max_periods} months"

    return SinglePayoffProjection(
        debt_id=debt.id,
        payment=amount,
        intervals_to_payoff=intervals,
        months_to_payoff=intervals * interval_months,
        total_interest_paid=round_currency(sum((r.interest for r in rows), Decimal(0))),
        total_amount_paid=round_currency(sum((r.payment for r in rows), Decimal(0))),
        payoff_date=payoff_date,
        warning=warning,
        schedule=tuple(rows),
    )


__all__ = [
    "LOW_PAYMENT_WARNING",
    "MAX_PERIODS",
    "SimulationRun",
    "SimulationState",
    "project_payoff",
    "project_single_debt",
    "simulate",
]
