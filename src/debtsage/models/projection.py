"""Result objects produced by the payoff engine.

Everything here is created fresh by a single engine call and never mutated
afterwards. ``as_dict`` renders plain JSON-friendly structures: decimals
become strings so no precision is lost on the way out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Hashable

from .strategy import Strategy

INFINITE = Decimal("Infinity")


def to_jsonable(value: Any) -> Any:
    """Convert result objects into JSON-serialisable builtins."""

    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, float) and math.isinf(value):
        return "Infinity"
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class DebtPayment:
    """One debt's outcome for one simulated period.

    ``principal`` is negative when the payment did not cover the interest.
    ``written_off`` is the sub-cent residual dropped when the debt cleared.
    """

    debt_id: Hashable
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal
    written_off: Decimal = Decimal(0)


@dataclass(frozen=True, slots=True)
class MonthlyProjection:
    """All debt payments made in one calendar period."""

    period_key: str
    payments: tuple[DebtPayment, ...]
    total_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    available_extra: Decimal = Decimal(0)

    @classmethod
    def from_payments(
        cls, period_key: str, payments: tuple[DebtPayment, ...], *, available_extra: Decimal
    ) -> "MonthlyProjection":
        return cls(
            period_key=period_key,
            payments=payments,
            total_payment=sum((p.payment for p in payments), Decimal(0)),
            total_interest=sum((p.interest for p in payments), Decimal(0)),
            total_principal=sum((p.principal for p in payments), Decimal(0)),
            available_extra=available_extra,
        )

    def payment_for(self, debt_id: Hashable) -> DebtPayment | None:
        """Return the payment row for *debt_id*, if it was active this period."""

        for payment in self.payments:
            if payment.debt_id == debt_id:
                return payment
        return None


@dataclass(frozen=True, slots=True)
class DebtPayoff:
    """When a single debt reached a zero balance."""

    debt_id: Hashable
    period_key: str
    months: int


@dataclass(frozen=True, slots=True)
class ProjectionResult:
    """Aggregate outcome of a multi-debt payoff simulation."""

    strategy: Strategy
    schedule: tuple[MonthlyProjection, ...]
    total_interest_paid: Decimal
    total_paid: Decimal
    debt_free_date: str | None
    months_to_payoff: int
    payoff_order: tuple[DebtPayoff, ...] = ()
    non_amortizing_debt_ids: tuple[Hashable, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_debt_free(self) -> bool:
        return self.debt_free_date is not None

    def as_dict(self) -> dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True, slots=True)
class SinglePayoffProjection:
    """Payoff outlook for one debt at a fixed payment.

    Counts are ``math.inf`` and money fields ``Decimal('Infinity')`` when the
    payment never covers the interest.
    """

    debt_id: Hashable
    payment: Decimal
    intervals_to_payoff: int | float
    months_to_payoff: int | float
    total_interest_paid: Decimal
    total_amount_paid: Decimal
    payoff_date: str | None
    warning: str | None = None
    schedule: tuple[DebtPayment, ...] = ()

    @property
    def converges(self) -> bool:
        return not math.isinf(self.intervals_to_payoff)

    def as_dict(self) -> dict[str, Any]:
        return to_jsonable(self)


@dataclass(frozen=True, slots=True)
class Recommendation:
    recommended: Strategy
    reason: str
    interest_savings: Decimal


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Snowball and avalanche runs side by side plus a recommendation."""

    comparisons: tuple[ProjectionResult, ...]
    recommendation: Recommendation

    def by_strategy(self, strategy: Strategy | str) -> ProjectionResult:
        wanted = Strategy.parse(strategy)
        for result in self.comparisons:
            if result.strategy is wanted:
                return result
        raise KeyError(f"No projection for strategy {wanted.value!r}")

    def as_dict(self) -> dict[str, Any]:
        return to_jsonable(self)


__all__ = [
    "DebtPayment",
    "DebtPayoff",
    "INFINITE",
    "MonthlyProjection",
    "ProjectionResult",
    "Recommendation",
    "SinglePayoffProjection",
    "StrategyComparison",
    "to_jsonable",
]
