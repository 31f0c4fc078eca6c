"""Repayment strategies and their ordering keys."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .debt import Debt


class Strategy(str, Enum):
    """Supported debt repayment strategies."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    CUSTOM = "custom"
    MINIMUM = "minimum"

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Map a strategy name onto the enum.

        Unrecognised names fall back to ``MINIMUM`` (pay minimums only, no
        reordering) rather than raising.
        """

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Strategy must be a string, got {type(value).__name__}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.MINIMUM

    @property
    def sort_key(self) -> Callable[["Debt"], object] | None:
        """Key function used to order debts, or ``None`` for input order."""

        return _SORT_KEYS[self]


_SORT_KEYS: dict[Strategy, Callable[["Debt"], object] | None] = {
    Strategy.SNOWBALL: lambda debt: debt.balance,
    # Negated so a stable ascending sort yields descending rates.
    Strategy.AVALANCHE: lambda debt: -debt.annual_interest_rate_percent,
    Strategy.CUSTOM: lambda debt: debt.priority,
    Strategy.MINIMUM: None,
}


__all__ = ["Strategy"]
