"""Period amortizer tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from debtsage.models import PaymentInterval
from debtsage.services.amortization import BALANCE_EPSILON, amortize, period_rate


@pytest.mark.parametrize(
    ("rate", "interval", "expected"),
    [
        ("36", PaymentInterval.MONTHLY, Decimal("0.03")),
        ("10", PaymentInterval.HALF_YEARLY, Decimal("0.05")),
        ("12", PaymentInterval.YEARLY, Decimal("0.12")),
        ("0", PaymentInterval.MONTHLY, Decimal("0")),
    ],
)
def test_period_rate(debt_factory, rate, interval, expected):
    debt = debt_factory(1000, rate, 50, interval=interval)

    assert period_rate(debt) == expected


def test_interest_then_principal(debt_factory):
    debt = debt_factory(1000, 12, 50)

    row = amortize(debt, Decimal(150), period_rate(debt))

    assert row.interest == Decimal("10.00")
    assert row.principal == Decimal("140.00")
    assert row.payment == Decimal(150)
    assert row.remaining_balance == Decimal("860.00")


def test_final_payment_is_trimmed_to_payoff_amount(debt_factory):
    debt = debt_factory(100, 12, 50)

    row = amortize(debt, Decimal(500), period_rate(debt))

    assert row.principal == Decimal(100)
    assert row.interest == Decimal("1.00")
    assert row.payment == Decimal("101.00")
    assert row.remaining_balance == 0
    assert row.written_off == 0


def test_residual_within_epsilon_is_written_off(debt_factory):
    debt = debt_factory(100, 0, 50)

    row = amortize(debt, Decimal("99.995"), Decimal(0))

    assert Decimal(100) - Decimal("99.995") <= BALANCE_EPSILON
    assert row.remaining_balance == 0
    assert row.payment == Decimal("99.995")
    assert row.principal == Decimal("99.995")
    assert row.written_off == Decimal("0.005")
    assert row.payment == row.principal + row.interest


def test_clearing_payment_never_exceeds_offer(debt_factory):
    debt = debt_factory("100.005", 0, 50)

    row = amortize(debt, Decimal(100), Decimal(0))

    assert row.payment == Decimal(100)
    assert row.principal == Decimal(100)
    assert row.written_off == Decimal("0.005")
    assert row.remaining_balance == 0


def test_residual_above_epsilon_is_kept(debt_factory):
    debt = debt_factory(100, 0, 50)

    row = amortize(debt, Decimal("99.98"), Decimal(0))

    assert row.remaining_balance == Decimal("0.02")


def test_payment_below_interest_adds_unpaid_interest_to_balance(debt_factory):
    debt = debt_factory(10000, 36, 10)

    row = amortize(debt, Decimal(10), period_rate(debt))

    assert row.interest == Decimal("300.00")
    assert row.principal == Decimal("-290.00")
    assert row.payment == Decimal(10)
    assert row.payment == row.principal + row.interest
    assert row.remaining_balance == Decimal("10290.00")


def test_payment_equal_to_interest_keeps_balance(debt_factory):
    debt = debt_factory(10000, 36, 300)

    row = amortize(debt, Decimal(300), period_rate(debt))

    assert row.principal == 0
    assert row.remaining_balance == Decimal(10000)


def test_cleared_debt_produces_zero_row(debt_factory):
    debt = debt_factory(0, 12, 50, original_amount=500)

    row = amortize(debt, Decimal(50), period_rate(debt))

    assert (row.payment, row.principal, row.interest, row.remaining_balance) == (0, 0, 0, 0)


def test_amortize_does_not_round(debt_factory):
    debt = debt_factory("1234.56", "19.99", 50)

    row = amortize(debt, Decimal(50), period_rate(debt))

    assert row.interest == debt.balance * debt.period_rate
    assert row.interest != row.interest.quantize(Decimal("0.01"))
