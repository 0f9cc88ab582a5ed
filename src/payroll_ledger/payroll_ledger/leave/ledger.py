from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..attendance.model import AttendanceDay
from ..attendance.repository import AttendanceRepository
from ..common.bulk import BulkResult, run_bulk
from ..common.validators import require_non_negative_int
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import LeaveBalance
from .repository import LeaveUsageRepository

logger = logging.getLogger(__name__)


class LeaveLedger:
    """Annual leave accounting kept in step with attendance days.

    Every attendance write goes through ``write_day``/``remove_day`` so that a
    day moving into leave adds one used day and moving out of leave (or being
    deleted while on leave) gives it back, floored at zero.
    """

    def __init__(self, attendance: AttendanceRepository, usage: LeaveUsageRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._usage = usage
        self._employees = employees

    def _employee(self, employee_id) -> Employee:
        employee_id = require_non_negative_int(employee_id, "Employee id")
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def _adjust(self, employee_id: int, delta: int) -> int:
        used = self._usage.get(employee_id).days_used
        new_used = max(0, used + delta)
        if new_used != used:
            self._usage.set(employee_id, new_used)
        return new_used

    def write_day(self, day: AttendanceDay) -> AttendanceDay:
        """Store a day (canonicalized) and account for a leave transition.

        Raises ValidationError when a new leave day would exceed the quota.
        """

        employee = self._employee(day.employee_id)
        day = day.canonical()
        current = self._attendance.get(employee.employee_id, day.work_date)
        was_leave = bool(current and current.is_leave)

        if day.is_leave and not was_leave:
            used = self._usage.get(employee.employee_id).days_used
            if used + 1 > employee.total_annual_leave_days:
                raise ValidationError(
                    f"Employee {employee.employee_id} has no leave days left "
                    f"({used}/{employee.total_annual_leave_days} used)"
                )

        self._attendance.upsert(day)

        if day.is_leave != was_leave:
            self._adjust(employee.employee_id, 1 if day.is_leave else -1)
        return day

    def remove_day(self, employee_id: int, work_date: date) -> bool:
        current = self._attendance.get(int(employee_id), work_date)
        if not current:
            return False
        deleted = self._attendance.delete(int(employee_id), work_date)
        if deleted and current.is_leave:
            self._adjust(int(employee_id), -1)
        return deleted

    def toggle_leave(self, employee_id: int, work_date: date, *, leave_type: Optional[str] = None) -> AttendanceDay:
        employee_id = self._employee(employee_id).employee_id
        current = self._attendance.get(employee_id, work_date)
        if current and current.is_leave:
            return self.write_day(AttendanceDay.empty(employee_id, work_date))
        return self.write_day(AttendanceDay.leave(employee_id, work_date, leave_type))

    def bulk_add_leave(
        self,
        work_date: date,
        employee_ids: Iterable[Any],
        *,
        leave_type: Optional[str] = None,
    ) -> BulkResult:
        """Mark the date as leave for each employee; already-on-leave days are left alone."""

        def apply(raw_id) -> None:
            employee_id = self._employee(raw_id).employee_id
            current = self._attendance.get(employee_id, work_date)
            if current and current.is_leave:
                return
            self.write_day(AttendanceDay.leave(employee_id, work_date, leave_type))

        return run_bulk(
            list(employee_ids),
            key=str,
            apply=apply,
            operation=f"bulk_add_leave {work_date.isoformat()}",
        )

    def delete_leave_day(self, employee_id: int, work_date: date) -> bool:
        return self.remove_day(employee_id, work_date)

    def set_used_days(self, employee_id: int, days_used: int) -> LeaveBalance:
        employee = self._employee(employee_id)
        days_used = require_non_negative_int(days_used, "Used leave days")
        if days_used > employee.total_annual_leave_days:
            raise ValidationError(
                f"Used leave days ({days_used}) exceed the annual quota ({employee.total_annual_leave_days})"
            )
        self._usage.set(employee.employee_id, days_used)
        return self._balance(employee)

    def reset_all(self, new_annual_quota: int) -> int:
        """Start a new leave year: zero every counter and apply one shared quota.

        One quota is applied to everyone; per-employee quotas
        are edited on the employee profile afterwards. Returns employees reset.
        """

        quota = require_non_negative_int(new_annual_quota, "Annual leave days")
        employees = self._employees.list_all()
        for employee in employees:
            self._usage.set(employee.employee_id, 0)
        self._employees.set_annual_leave_days_all(quota)
        logger.info("Leave year reset for %d employee(s), quota=%d", len(employees), quota)
        return len(employees)

    def reset_employee(self, employee_id: int, new_annual_quota: int) -> LeaveBalance:
        employee = self._employee(employee_id)
        quota = require_non_negative_int(new_annual_quota, "Annual leave days")
        updated = replace(employee, total_annual_leave_days=quota)
        self._employees.update(updated)
        self._usage.set(employee.employee_id, 0)
        logger.info("Leave reset for employee %s, quota=%d", employee.employee_id, quota)
        return self._balance(updated)

    def _balance(self, employee: Employee) -> LeaveBalance:
        return LeaveBalance(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            total_annual_leave_days=employee.total_annual_leave_days,
            days_used=self._usage.get(employee.employee_id).days_used,
        )

    def get_balance(self, employee_id: int) -> LeaveBalance:
        return self._balance(self._employee(employee_id))

    def list_balances(self) -> Sequence[LeaveBalance]:
        balances = [self._balance(e) for e in self._employees.list_all()]
        balances.sort(key=lambda b: (b.full_name.lower(), b.employee_id))
        return balances
