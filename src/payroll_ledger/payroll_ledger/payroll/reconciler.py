from __future__ import annotations

from dataclasses import dataclass

from ..payments.model import PaymentTotals


@dataclass(frozen=True)
class Balances:
    remaining_salary_balance: float
    remaining_bank_balance: float


def reconcile(*, total_monthly_salary: float, bank_target: float, payments: PaymentTotals) -> Balances:
    """Outstanding balances. Negative means overpaid; no rounding, no clamping."""

    return Balances(
        remaining_salary_balance=total_monthly_salary - payments.cash - payments.bank,
        remaining_bank_balance=bank_target - payments.bank,
    )
