"""Debt and lump-sum value objects consumed by the payoff engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Hashable

from ..periods import parse_period_key, period_key


def to_decimal(value: object, *, field_name: str) -> Decimal:
    """Coerce a numeric input to ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``0.1`` instead of picking up
    binary noise. Booleans and non-numeric types are rejected.
    """

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"{field_name} must be numeric, got {type(value).__name__}")
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"{field_name} is not a number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"{field_name} must be finite, got {value!r}")
    return result


class PaymentInterval(IntEnum):
    """How many times per year a debt is billed."""

    MONTHLY = 12
    HALF_YEARLY = 2
    YEARLY = 1

    @property
    def months(self) -> int:
        """Calendar months covered by one billing interval."""

        return 12 // self.value

    @classmethod
    def parse(cls, value: object) -> "PaymentInterval":
        """Accept an enum member, an intervals-per-year count or a name."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            if normalized.isdigit():
                return cls(int(normalized))
            try:
                return cls[normalized.upper()]
            except KeyError:
                raise ValueError(f"Unknown payment interval {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Unsupported payment intervals per year: {value}") from None
        raise TypeError(f"Payment interval must be int or str, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Debt:
    """Snapshot of one liability for the duration of a simulation."""

    id: Hashable
    name: str
    balance: Decimal
    original_amount: Decimal
    annual_interest_rate_percent: Decimal
    minimum_payment: Decimal
    payment_intervals_per_year: PaymentInterval = PaymentInterval.MONTHLY
    priority: int = 0

    def __post_init__(self) -> None:
        for name in (
            "balance",
            "original_amount",
            "annual_interest_rate_percent",
            "minimum_payment",
        ):
            object.__setattr__(self, name, to_decimal(getattr(self, name), field_name=name))
        object.__setattr__(
            self,
            "payment_intervals_per_year",
            PaymentInterval.parse(self.payment_intervals_per_year),
        )
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise TypeError(f"priority must be int, got {type(self.priority).__name__}")
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        try:
            hash(self.id)
        except TypeError:
            raise TypeError(f"Debt id must be hashable, got {type(self.id).__name__}") from None

    @property
    def period_rate(self) -> Decimal:
        """Interest rate applied once per billing interval, as a fraction."""

        return self.annual_interest_rate_percent / Decimal(100) / Decimal(
            int(self.payment_intervals_per_year)
        )

    @property
    def progress_percent(self) -> Decimal:
        """Share of the original principal already repaid, in percent."""

        if self.original_amount <= 0:
            return Decimal(0)
        return (self.original_amount - self.balance) / self.original_amount * Decimal(100)


@dataclass(frozen=True, slots=True)
class LumpSum:
    """One-time extra contribution applied in a single calendar month."""

    amount: Decimal
    period_key: str
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount, field_name="amount"))
        object.__setattr__(self, "period_key", period_key(parse_period_key(self.period_key)))


__all__ = ["Debt", "LumpSum", "PaymentInterval", "to_decimal"]
