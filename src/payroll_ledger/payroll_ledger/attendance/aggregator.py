from __future__ import annotations

import logging

from ..common.datetime_utils import in_month, month_bounds
from ..common.validators import require_month
from ..core.constants import LEAVE_DAY_HOURS
from ..core.exceptions import ConsistencyWarning
from .model import MonthlyAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceAggregator:
    """Reduce an employee's attendance days for a month into hour totals.

    Leave days count as exactly 8 normal hours and no overtime, whatever
    hours are stored on them; stale leave rows are logged, not rewritten.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def aggregate(self, employee_id: int, *, month: int, year: int) -> MonthlyAttendance:
        month, year = require_month(month, year)
        start, end = month_bounds(year, month)

        normal_hours = 0.0
        overtime_hours = 0.0
        leave_days = 0

        for day in self._attendance.list_for_employee(int(employee_id), start=start, end=end):
            if not in_month(day.work_date, year=year, month=month):
                continue
            if day.is_leave:
                if day.normal_hours != LEAVE_DAY_HOURS or day.overtime_hours != 0:
                    logger.warning(
                        "%s",
                        ConsistencyWarning(
                            f"Leave day {day.work_date.isoformat()} of employee {day.employee_id} "
                            f"has stored hours {day.normal_hours}/{day.overtime_hours}; using 8/0"
                        ),
                    )
                leave_days += 1
                continue
            normal_hours += day.normal_hours
            overtime_hours += day.overtime_hours

        return MonthlyAttendance(
            employee_id=int(employee_id),
            month=month,
            year=year,
            normal_hours=normal_hours,
            overtime_hours=overtime_hours,
            leave_days=leave_days,
        )
