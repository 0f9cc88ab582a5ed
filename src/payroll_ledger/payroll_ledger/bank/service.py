from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.bulk import BulkResult, run_bulk
from ..common.validators import require_month, require_non_negative_int, require_positive
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import BankSalaryEntry
from .repository import BankSalaryRepository


class BankSalaryService:
    """Use cases: bank-salary entries and the monthly bank target."""

    def __init__(self, bank_salaries: BankSalaryRepository, employees: EmployeeRepository):
        self._bank_salaries = bank_salaries
        self._employees = employees

    def _require_employee(self, employee_id) -> int:
        employee_id = require_non_negative_int(employee_id, "Employee id")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee_id

    def _require_entry(self, entry_id: int) -> BankSalaryEntry:
        entry = self._bank_salaries.get(int(entry_id))
        if not entry:
            raise NotFoundError(f"Bank salary entry {entry_id} does not exist")
        return entry

    def add_entry(self, *, employee_id: int, month: int, year: int, amount: float) -> int:
        month, year = require_month(month, year)
        amount = require_positive(amount, "Amount")
        employee_id = self._require_employee(employee_id)
        return self._bank_salaries.create(employee_id=employee_id, month=month, year=year, amount=amount)

    def update_entry(self, entry_id: int, *, employee_id: int, month: int, year: int, amount: float) -> BankSalaryEntry:
        self._require_entry(entry_id)
        month, year = require_month(month, year)
        amount = require_positive(amount, "Amount")
        employee_id = self._require_employee(employee_id)

        entry = BankSalaryEntry(
            entry_id=int(entry_id),
            employee_id=employee_id,
            month=month,
            year=year,
            amount=amount,
        )
        if not self._bank_salaries.update(entry):
            raise NotFoundError(f"Bank salary entry {entry_id} does not exist")
        return entry

    def delete_entry(self, entry_id: int) -> None:
        if not self._bank_salaries.delete(int(entry_id)):
            raise NotFoundError(f"Bank salary entry {entry_id} does not exist")

    def set_bulk(
        self,
        *,
        month: int,
        year: int,
        amounts: Iterable[Any],
        parse: Optional[Callable[[Any], tuple[int, float]]] = None,
    ) -> BulkResult:
        """Add one entry per (employee_id, amount) for the month."""

        month, year = require_month(month, year)
        return run_bulk(
            list(amounts),
            key=lambda item: str(item[0]),
            apply=lambda item: self.add_entry(employee_id=item[0], month=month, year=year, amount=item[1]),
            operation=f"bank_salaries_bulk {year}-{month:02d}",
            parse=parse,
        )

    def list_for_month(self, *, month: int, year: int, employee_id: Optional[int] = None) -> Sequence[BankSalaryEntry]:
        month, year = require_month(month, year)
        return self._bank_salaries.list_for_month(month=month, year=year, employee_id=employee_id)

    def bank_target(self, employee_id: int, *, month: int, year: int) -> float:
        """Sum of every bank-salary entry for the employee's month; 0 when none."""

        month, year = require_month(month, year)
        entries = self.list_for_month(month=month, year=year, employee_id=int(employee_id))
        return sum(
            (e.amount for e in entries if e.employee_id == int(employee_id) and (e.month, e.year) == (month, year)),
            0.0,
        )
