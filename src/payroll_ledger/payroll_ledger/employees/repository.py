from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, draft: EmployeeDraft) -> int:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def set_annual_leave_days_all(self, total_annual_leave_days: int) -> int:
        """Set the same quota on every employee. Returns rows touched."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        """Delete the employee and every record that belongs to it."""

        raise NotImplementedError
