"""Validated input forms that produce engine records.

The engine assumes numeric domains are already sane; these forms are where
user-supplied rows (CSV, CLI, an embedding web layer) get checked first.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .models.debt import Debt, LumpSum, PaymentInterval
from .periods import parse_period_key, period_key

_FIELD_DEFAULTS: dict[str, Any] = {"interest_rate": Decimal(0), "priority": 0, "name": ""}


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class DebtForm(BaseModel):
    """One debt as entered by a user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str | int = Field(description="Identifier supplied by the data layer")
    name: str = Field(default="", max_length=120)
    balance: Decimal = Field(ge=0, description="Current outstanding principal")
    original_amount: Decimal | None = Field(
        default=None, gt=0, description="Initial principal; defaults to the balance"
    )
    interest_rate: Decimal = Field(
        default=Decimal(0), ge=0, le=100, description="Annual interest rate in percent"
    )
    minimum_payment: Decimal = Field(gt=0, description="Payment due every billing interval")
    payment_interval: PaymentInterval = Field(default=PaymentInterval.MONTHLY)
    priority: int = Field(default=0, ge=0, description="Custom strategy order, lowest first")

    @field_validator("interest_rate", "priority", "name", mode="before")
    @classmethod
    def blank_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        if _blank_to_none(value) is None:
            return _FIELD_DEFAULTS[info.field_name]
        return value

    @field_validator("original_amount", mode="before")
    @classmethod
    def blank_original_amount(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("payment_interval", mode="before")
    @classmethod
    def parse_interval(cls, value: Any) -> PaymentInterval:
        """Accept ``monthly``/``half_yearly``/``yearly`` or ``12``/``2``/``1``."""

        value = _blank_to_none(value)
        if value is None:
            return PaymentInterval.MONTHLY
        try:
            return PaymentInterval.parse(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @model_validator(mode="after")
    def default_original_amount(self) -> "DebtForm":
        """New debts start at their original amount."""

        if self.original_amount is None:
            if self.balance <= 0:
                raise ValueError("original_amount is required when the balance is zero.")
            self.original_amount = self.balance
        return self

    def to_debt(self) -> Debt:
        return Debt(
            id=self.id,
            name=self.name or str(self.id),
            balance=self.balance,
            original_amount=self.original_amount,
            annual_interest_rate_percent=self.interest_rate,
            minimum_payment=self.minimum_payment,
            payment_intervals_per_year=self.payment_interval,
            priority=self.priority,
        )


class LumpSumForm(BaseModel):
    """A one-time contribution for a given month."""

    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal = Field(gt=0)
    month: str = Field(description="Month in YYYY-MM format")
    description: str = Field(default="", max_length=200)

    @field_validator("month")
    @classmethod
    def validate_month(cls, value: str) -> str:
        return period_key(parse_period_key(value))

    @field_validator("description", mode="before")
    @classmethod
    def blank_description(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_lump_sum(self) -> LumpSum:
        return LumpSum(amount=self.amount, period_key=self.month, description=self.description)


def validation_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten a pydantic error into ``{field: [messages]}``."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


__all__ = ["DebtForm", "LumpSumForm", "validation_errors"]
