"""Pytest configuration and shared fixtures for DebtSage tests.

Provides factories for engine records and helpers for comparing decimal
amounts, so tests exercise the payoff engine without any files or network.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from debtsage.models import Debt, LumpSum, PaymentInterval

START = "2025-01"


@pytest.fixture(autouse=True)
def reset_debtsage_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""

    yield
    logger = logging.getLogger("debtsage")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for engine Debt records with sensible defaults.

    Returns:
        Callable: Function that builds Debt instances
    """

    counter = {"next": 1}

    def _create_debt(
        balance: Decimal | int | str = 1000,
        rate: Decimal | int | str = 0,
        minimum_payment: Decimal | int | str = 100,
        *,
        id=None,
        name: str | None = None,
        original_amount: Decimal | int | str | None = None,
        interval: PaymentInterval = PaymentInterval.MONTHLY,
        priority: int = 0,
    ) -> Debt:
        if id is None:
            id = counter["next"]
            counter["next"] += 1
        return Debt(
            id=id,
            name=name or f"Debt {id}",
            balance=balance,
            original_amount=original_amount if original_amount is not None else balance or 1,
            annual_interest_rate_percent=rate,
            minimum_payment=minimum_payment,
            payment_intervals_per_year=interval,
            priority=priority,
        )

    return _create_debt


@pytest.fixture
def lump_sum_factory():
    """Factory for LumpSum records."""

    def _create_lump_sum(amount: Decimal | int | str, month: str, description: str = "") -> LumpSum:
        return LumpSum(amount=amount, period_key=month, description=description)

    return _create_lump_sum


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_decimal_equal(actual, expected, tolerance: Decimal = Decimal("0.000001")):
    """Assert that two amounts are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    diff = abs(Decimal(str(actual)) - Decimal(str(expected)))
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff: {diff})"
