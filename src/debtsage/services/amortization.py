"""Interest accrual and principal reduction for a single debt and period."""

from __future__ import annotations

from decimal import Decimal

from ..models.debt import Debt
from ..models.projection import DebtPayment

# Residual balances at or below one cent are written off so floating tails
# cannot keep a debt alive for extra periods.
BALANCE_EPSILON = Decimal("0.01")


def period_rate(debt: Debt) -> Decimal:
    """Fraction of the balance charged as interest for one billing interval."""

    return debt.period_rate


def amortize(debt: Debt, payment: Decimal, rate: Decimal) -> DebtPayment:
    """Apply one period's interest and payment to ``debt.balance``.

    ``interest = balance * rate`` and ``principal = min(payment - interest,
    balance)``, so ``payment == principal + interest`` on every row.

    A payment below the interest gives a negative principal: the unpaid
    interest is added to the balance, which grows. The simulation flags such
    debts as non-amortizing.

    When the residual after the payment is within ``BALANCE_EPSILON`` the
    debt is cleared. The recorded payment never exceeds what was offered;
    any residual the payment did not cover is reported as ``written_off``.
    """

    balance = debt.balance
    if balance <= 0:
        return DebtPayment(
            debt_id=debt.id,
            payment=Decimal(0),
            principal=Decimal(0),
            interest=Decimal(0),
            remaining_balance=Decimal(0),
        )

    interest = balance * rate
    principal = min(payment - interest, balance)
    remaining = balance - principal
    if remaining <= BALANCE_EPSILON:
        if payment >= balance + interest:
            return DebtPayment(
                debt_id=debt.id,
                payment=balance + interest,
                principal=balance,
                interest=interest,
                remaining_balance=Decimal(0),
            )
        return DebtPayment(
            debt_id=debt.id,
            payment=payment,
            principal=principal,
            interest=interest,
            remaining_balance=Decimal(0),
            written_off=remaining,
        )

    return DebtPayment(
        debt_id=debt.id,
        payment=payment,
        principal=principal,
        interest=interest,
        remaining_balance=remaining,
    )


__all__ = ["BALANCE_EPSILON", "amortize", "period_rate"]
