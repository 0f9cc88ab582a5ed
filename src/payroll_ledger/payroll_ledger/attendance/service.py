from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.bulk import BulkResult, run_bulk
from ..common.validators import optional_text, require_at_most, require_non_negative
from ..core.constants import MAX_HOURS_PER_DAY
from ..core.exceptions import NotFoundError
from ..leave.ledger import LeaveLedger
from .model import AttendanceDay
from .repository import AttendanceRepository


def build_day(
    *,
    employee_id: int,
    work_date: date,
    normal_hours: float = 0.0,
    overtime_hours: float = 0.0,
    is_leave: bool = False,
    leave_type: Optional[str] = None,
) -> AttendanceDay:
    """Validate caller-supplied hours into an AttendanceDay.

    Hour values sent with a leave day are ignored; the day is stored as 8/0.
    """

    normal = require_at_most(require_non_negative(normal_hours, "Normal hours"), "Normal hours", MAX_HOURS_PER_DAY)
    overtime = require_at_most(
        require_non_negative(overtime_hours, "Overtime hours"), "Overtime hours", MAX_HOURS_PER_DAY
    )
    day = AttendanceDay(
        employee_id=int(employee_id),
        work_date=work_date,
        normal_hours=normal,
        overtime_hours=overtime,
        is_leave=bool(is_leave),
        leave_type=optional_text(leave_type),
    )
    return day.canonical()


class AttendanceService:
    """Use cases: individual-day, bulk-day and bulk-employee attendance entry."""

    def __init__(self, attendance: AttendanceRepository, ledger: LeaveLedger):
        self._attendance = attendance
        self._ledger = ledger

    def get_day(self, employee_id: int, work_date: date) -> Optional[AttendanceDay]:
        return self._attendance.get(int(employee_id), work_date)

    def list_days(self, employee_id: int) -> Sequence[AttendanceDay]:
        return sorted(self._attendance.list_for_employee(int(employee_id)), key=lambda d: d.work_date)

    def daily_entries(self, work_date: date) -> Sequence[AttendanceDay]:
        return sorted(self._attendance.list_for_date(work_date), key=lambda d: d.employee_id)

    def record_day(self, day: AttendanceDay) -> AttendanceDay:
        """Create or overwrite the day for (employee, date)."""

        return self._ledger.write_day(build_day(**_fields(day)))

    def update_day(self, day: AttendanceDay) -> AttendanceDay:
        if not self._attendance.get(day.employee_id, day.work_date):
            raise NotFoundError(f"No attendance for employee {day.employee_id} on {day.work_date.isoformat()}")
        return self.record_day(day)

    def delete_day(self, employee_id: int, work_date: date) -> None:
        if not self._ledger.remove_day(employee_id, work_date):
            raise NotFoundError(f"No attendance for employee {employee_id} on {work_date.isoformat()}")

    def record_days_bulk(self, days: Iterable[Any], *, parse: Optional[Callable[[Any], AttendanceDay]] = None) -> BulkResult:
        """Bulk-day entry: any mix of employees and dates, one outcome per day."""

        return run_bulk(
            list(days),
            key=lambda d: f"{d.employee_id}@{d.work_date.isoformat()}",
            apply=self.record_day,
            operation="record_days_bulk",
            parse=parse,
        )

    def save_daily_bulk(
        self,
        work_date: date,
        days: Iterable[Any],
        *,
        parse: Optional[Callable[[Any], AttendanceDay]] = None,
    ) -> BulkResult:
        """Bulk-employee entry for a single date; the date is forced onto every row."""

        def on_date(raw) -> AttendanceDay:
            day = raw if parse is None else parse(raw)
            return AttendanceDay(**{**_fields(day), "work_date": work_date})

        return run_bulk(
            list(days),
            key=lambda d: str(d.employee_id),
            apply=self.record_day,
            operation=f"save_daily_bulk {work_date.isoformat()}",
            parse=on_date,
        )


def _fields(day: AttendanceDay) -> dict:
    return {
        "employee_id": day.employee_id,
        "work_date": day.work_date,
        "normal_hours": day.normal_hours,
        "overtime_hours": day.overtime_hours,
        "is_leave": day.is_leave,
        "leave_type": day.leave_type,
    }
