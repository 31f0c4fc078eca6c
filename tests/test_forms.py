"""Validation tests for debt and lump-sum forms."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from debtsage.forms import DebtForm, LumpSumForm, validation_errors
from debtsage.models import Debt, PaymentInterval


def _debt_row(**overrides):
    row = {
        "id": "card",
        "name": "Visa",
        "balance": "2500.00",
        "interest_rate": "19.99",
        "minimum_payment": "75",
    }
    row.update(overrides)
    return row


class TestDebtForm:
    def test_valid_row_builds_debt(self):
        debt = DebtForm.model_validate(_debt_row(payment_interval="half_yearly")).to_debt()

        assert isinstance(debt, Debt)
        assert debt.id == "card"
        assert debt.balance == Decimal("2500.00")
        assert debt.original_amount == Decimal("2500.00")
        assert debt.annual_interest_rate_percent == Decimal("19.99")
        assert debt.payment_intervals_per_year is PaymentInterval.HALF_YEARLY

    def test_blank_optional_fields_use_defaults(self):
        form = DebtForm.model_validate(
            _debt_row(interest_rate=" ", priority="", name="", payment_interval="")
        )

        assert form.interest_rate == Decimal(0)
        assert form.priority == 0
        assert form.payment_interval is PaymentInterval.MONTHLY
        assert form.to_debt().name == "card"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12", PaymentInterval.MONTHLY),
            ("2", PaymentInterval.HALF_YEARLY),
            ("Yearly", PaymentInterval.YEARLY),
            (1, PaymentInterval.YEARLY),
        ],
    )
    def test_payment_interval_spellings(self, value, expected):
        form = DebtForm.model_validate(_debt_row(payment_interval=value))

        assert form.payment_interval is expected

    def test_explicit_original_amount(self):
        form = DebtForm.model_validate(_debt_row(balance="0", original_amount="900"))

        assert form.to_debt().original_amount == Decimal(900)

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"balance": "-1"}, "balance"),
            ({"interest_rate": "150"}, "interest_rate"),
            ({"minimum_payment": "0"}, "minimum_payment"),
            ({"payment_interval": "weekly"}, "payment_interval"),
            ({"priority": "-2"}, "priority"),
            ({"balance": "lots"}, "balance"),
        ],
    )
    def test_invalid_fields(self, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            DebtForm.model_validate(_debt_row(**overrides))

        assert field in validation_errors(exc_info.value)

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            DebtForm.model_validate({"name": "Nothing else"})

        errors = validation_errors(exc_info.value)
        assert {"id", "balance", "minimum_payment"} <= set(errors)

    def test_paid_off_debt_needs_original_amount(self):
        with pytest.raises(ValidationError) as exc_info:
            DebtForm.model_validate(_debt_row(balance="0"))

        errors = validation_errors(exc_info.value)
        assert any("original_amount is required" in msg for msg in errors["__root__"])


class TestLumpSumForm:
    def test_valid_lump_sum(self):
        lump = LumpSumForm.model_validate(
            {"amount": "500", "month": " 2025-06 ", "description": "Tax refund"}
        ).to_lump_sum()

        assert lump.amount == Decimal(500)
        assert lump.period_key == "2025-06"
        assert lump.description == "Tax refund"

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"amount": "0", "month": "2025-06"}, "amount"),
            ({"amount": "10", "month": "2025-13"}, "month"),
            ({"amount": "10", "month": "June"}, "month"),
        ],
    )
    def test_invalid_lump_sum(self, payload, field):
        with pytest.raises(ValidationError) as exc_info:
            LumpSumForm.model_validate(payload)

        assert field in validation_errors(exc_info.value)
