"""Calendar period helpers.

Periods are calendar months named by a ``YYYY-MM`` key. The simulation only
ever needs the first day of a month, so every helper normalises to day 1.
"""

from __future__ import annotations

import re
from datetime import date

_PERIOD_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def month_start(value: date) -> date:
    """Return the first day of the month containing *value*."""

    return date(value.year, value.month, 1)


def add_months(value: date, months: int) -> date:
    """Return the first day of the month *months* after *value*."""

    month = value.month + months
    year = value.year + (month - 1) // 12
    month = ((month - 1) % 12) + 1
    return date(year, month, 1)


def period_key(value: date) -> str:
    """Format a date as its ``YYYY-MM`` period key."""

    return f"{value.year:04d}-{value.month:02d}"


def parse_period_key(key: str) -> date:
    """Parse a ``YYYY-MM`` key into the first day of that month."""

    if not isinstance(key, str):
        raise TypeError(f"Period key must be a string, got {type(key).__name__}")
    match = _PERIOD_KEY.match(key.strip())
    if match is None:
        raise ValueError(f"Invalid period key {key!r}; expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in period key {key!r}")
    return date(year, month, 1)


def coerce_period(value: date | str) -> date:
    """Accept either a date or a period key and return the month start."""

    if isinstance(value, date):
        return month_start(value)
    return parse_period_key(value)


__all__ = ["add_months", "coerce_period", "month_start", "parse_period_key", "period_key"]
