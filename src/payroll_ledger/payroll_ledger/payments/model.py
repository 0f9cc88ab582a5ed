from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PaymentKey:
    """Identity of a payment for update/delete purposes."""

    employee_id: int
    month: int
    year: int
    payment_date: date

    def __str__(self) -> str:
        return f"{self.employee_id}:{self.year}-{self.month:02d}@{self.payment_date.isoformat()}"


@dataclass(frozen=True)
class PaymentRecord:
    """Cash and/or bank money disbursed to an employee against a month."""

    employee_id: int
    month: int
    year: int
    payment_date: date
    cash_amount: float = 0.0
    bank_amount: float = 0.0

    @property
    def key(self) -> PaymentKey:
        return PaymentKey(
            employee_id=self.employee_id,
            month=self.month,
            year=self.year,
            payment_date=self.payment_date,
        )

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "month": self.month,
            "year": self.year,
            "payment_date": self.payment_date.strftime("%Y-%m-%d"),
            "cash_amount": self.cash_amount,
            "bank_amount": self.bank_amount,
        }


@dataclass(frozen=True)
class PaymentTotals:
    cash: float = 0.0
    bank: float = 0.0


@dataclass(frozen=True)
class EmployeePayments:
    """Read-model: one employee's payments for a month with their sums."""

    employee_id: int
    full_name: str
    payments: tuple[PaymentRecord, ...]
    totals: PaymentTotals

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "payments": [p.to_dict() for p in self.payments],
            "total_cash": self.totals.cash,
            "total_bank": self.totals.bank,
        }
