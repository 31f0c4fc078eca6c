"""Per-period payment allocation (minimums plus a single extra target)."""

from __future__ import annotations

from decimal import Decimal
from typing import Collection, Hashable, Sequence

from ..models.debt import Debt


def allocate_payments(
    ordered_debts: Sequence[Debt],
    available_extra: Decimal,
    *,
    due_ids: Collection[Hashable] | None = None,
) -> dict[Hashable, Decimal]:
    """Return the payment offered to each debt for one period.

    Debts that are due this period (all of them when ``due_ids`` is ``None``)
    start at their minimum payment. The whole ``available_extra`` goes to the
    first debt in ``ordered_debts`` that still carries a balance; it is never
    split, and whatever that debt cannot absorb is not passed down the list.

    Debts that are neither due nor the extra target are left out of the map.
    """

    payments: dict[Hashable, Decimal] = {}
    for debt in ordered_debts:
        if debt.balance <= 0:
            continue
        if due_ids is None or debt.id in due_ids:
            payments[debt.id] = debt.minimum_payment

    if available_extra > 0:
        target = next((debt for debt in ordered_debts if debt.balance > 0), None)
        if target is not None:
            payments[target.id] = payments.get(target.id, Decimal(0)) + available_extra

    return payments


__all__ = ["allocate_payments"]
