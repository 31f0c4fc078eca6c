"""Strategy sorter tests."""

from __future__ import annotations

import pytest

from debtsage.models import Strategy
from debtsage.services.strategies import sort_debts


def _ids(debts):
    return [d.id for d in debts]


def test_snowball_orders_by_smallest_balance(debt_factory):
    debts = [
        debt_factory(5000, 18, 100, id=1),
        debt_factory(1000, 12, 50, id=2),
        debt_factory(3000, 15, 75, id=3),
    ]

    assert _ids(sort_debts(debts, Strategy.SNOWBALL)) == [2, 3, 1]


def test_avalanche_orders_by_highest_rate(debt_factory):
    debts = [
        debt_factory(5000, 18, 100, id=1),
        debt_factory(1000, 12, 50, id=2),
        debt_factory(3000, 15, 75, id=3),
    ]

    assert _ids(sort_debts(debts, "avalanche")) == [1, 3, 2]


def test_custom_orders_by_priority(debt_factory):
    debts = [
        debt_factory(500, 5, 25, id="car", priority=3),
        debt_factory(800, 9, 25, id="card", priority=1),
        debt_factory(200, 2, 25, id="loan", priority=2),
    ]

    assert _ids(sort_debts(debts, Strategy.CUSTOM)) == ["card", "loan", "car"]


@pytest.mark.parametrize("strategy", [Strategy.MINIMUM, "minimum", "no-such-strategy"])
def test_minimum_and_unknown_keep_input_order(debt_factory, strategy):
    debts = [debt_factory(3000, id=1), debt_factory(100, id=2), debt_factory(2000, id=3)]

    assert _ids(sort_debts(debts, strategy)) == [1, 2, 3]


@pytest.mark.parametrize("strategy", [Strategy.SNOWBALL, Strategy.AVALANCHE, Strategy.CUSTOM])
def test_ties_preserve_input_order(debt_factory, strategy):
    """Equal keys keep their relative input order (stable sort)."""
    debts = [debt_factory(1000, 10, 50, id="first"), debt_factory(1000, 10, 50, id="second")]

    assert _ids(sort_debts(debts, strategy)) == ["first", "second"]
    assert _ids(sort_debts(list(reversed(debts)), strategy)) == ["second", "first"]


def test_sort_returns_new_list(debt_factory):
    debts = [debt_factory(2000, id=1), debt_factory(1000, id=2)]

    ordered = sort_debts(debts, Strategy.SNOWBALL)

    assert ordered is not debts
    assert _ids(debts) == [1, 2]


def test_strategy_parse_is_case_insensitive():
    assert Strategy.parse(" Avalanche ") is Strategy.AVALANCHE
    assert Strategy.parse("SNOWBALL") is Strategy.SNOWBALL
    assert Strategy.parse("whatever") is Strategy.MINIMUM


def test_strategy_parse_rejects_non_strings():
    with pytest.raises(TypeError):
        Strategy.parse(3)
