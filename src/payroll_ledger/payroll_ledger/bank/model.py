from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BankSalaryEntry:
    """Amount designated to be paid by bank transfer for an employee's month.

    Several entries may exist for the same month; they add up.
    """

    entry_id: int
    employee_id: int
    month: int
    year: int
    amount: float

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "employee_id": self.employee_id,
            "month": self.month,
            "year": self.year,
            "amount": self.amount,
        }
