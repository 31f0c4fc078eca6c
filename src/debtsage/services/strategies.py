"""Debt ordering for payoff strategies."""

from __future__ import annotations

from typing import Iterable

from ..models.debt import Debt
from ..models.strategy import Strategy


def sort_debts(debts: Iterable[Debt], strategy: Strategy | str) -> list[Debt]:
    """Return debts in payoff priority order for *strategy*.

    - snowball: smallest balance first
    - avalanche: highest interest rate first
    - custom: lowest ``priority`` first
    - minimum (or an unknown name): input order

    ``sorted`` is stable, so ties keep their input order. Callers rely on
    this to decide which of several tied debts receives the extra payment.
    """

    key = Strategy.parse(strategy).sort_key
    if key is None:
        return list(debts)
    return sorted(debts, key=key)


__all__ = ["sort_debts"]
