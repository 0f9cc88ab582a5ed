from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.constants import LEAVE_DAY_HOURS


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one employee/date record of hours worked or leave taken.

    A day is either a worked day (normal + overtime hours) or a leave day,
    which is always 8 normal hours and no overtime.
    """

    employee_id: int
    work_date: date
    normal_hours: float = 0.0
    overtime_hours: float = 0.0
    is_leave: bool = False
    leave_type: Optional[str] = None

    @classmethod
    def leave(cls, employee_id: int, work_date: date, leave_type: Optional[str] = None) -> "AttendanceDay":
        return cls(
            employee_id=int(employee_id),
            work_date=work_date,
            normal_hours=LEAVE_DAY_HOURS,
            overtime_hours=0.0,
            is_leave=True,
            leave_type=leave_type,
        )

    @classmethod
    def empty(cls, employee_id: int, work_date: date) -> "AttendanceDay":
        return cls(employee_id=int(employee_id), work_date=work_date)

    @property
    def is_canonical(self) -> bool:
        if not self.is_leave:
            return self.leave_type is None
        return self.normal_hours == LEAVE_DAY_HOURS and self.overtime_hours == 0

    def canonical(self) -> "AttendanceDay":
        if self.is_leave:
            return replace(self, normal_hours=LEAVE_DAY_HOURS, overtime_hours=0.0)
        return replace(self, leave_type=None)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "normal_hours": self.normal_hours,
            "overtime_hours": self.overtime_hours,
            "is_leave": self.is_leave,
            "leave_type": self.leave_type,
        }


@dataclass(frozen=True)
class MonthlyAttendance:
    """Read-model: one employee's attendance reduced over a calendar month."""

    employee_id: int
    month: int
    year: int
    normal_hours: float = 0.0
    overtime_hours: float = 0.0
    leave_days: int = 0

    @property
    def leave_hours(self) -> float:
        return self.leave_days * LEAVE_DAY_HOURS
