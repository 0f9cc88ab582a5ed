from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import BankSalaryEntry


class BankSalaryRepository(Protocol):
    def get(self, entry_id: int) -> Optional[BankSalaryEntry]:
        raise NotImplementedError

    def list_for_month(self, *, month: int, year: int, employee_id: Optional[int] = None) -> Sequence[BankSalaryEntry]:
        raise NotImplementedError

    def create(self, *, employee_id: int, month: int, year: int, amount: float) -> int:
        """Insert a new entry. Returns entry_id."""

        raise NotImplementedError

    def update(self, entry: BankSalaryEntry) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError
