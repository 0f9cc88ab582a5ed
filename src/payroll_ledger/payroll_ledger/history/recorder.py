from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import today_local
from ..core.enums import ChangeType
from ..employees.model import Employee
from .model import ChangeHistoryEntry
from .repository import ChangeHistoryRepository

logger = logging.getLogger(__name__)

_LABELS = {
    ChangeType.HOURLY_RATE: "Hourly rate",
    ChangeType.OVERTIME_RATE: "Overtime rate",
    ChangeType.FIXED_MONTHLY_SALARY: "Fixed monthly salary",
    ChangeType.TOTAL_ANNUAL_LEAVE_DAYS: "Annual leave days",
}

# Tracked fields in the order entries are written for a single edit.
_TRACKED: tuple[tuple[ChangeType, str], ...] = (
    (ChangeType.HOURLY_RATE, "hourly_rate"),
    (ChangeType.OVERTIME_RATE, "overtime_rate"),
    (ChangeType.FIXED_MONTHLY_SALARY, "fixed_monthly_salary"),
    (ChangeType.TOTAL_ANNUAL_LEAVE_DAYS, "total_annual_leave_days"),
)


def _fmt(change_type: ChangeType, value) -> str:
    if value is None:
        return "N/A"
    if change_type == ChangeType.TOTAL_ANNUAL_LEAVE_DAYS:
        return str(int(value))
    return f"{float(value):.2f}"


def describe_change(change_type: ChangeType, old, new) -> str:
    return f"{_LABELS[change_type]} changed from {_fmt(change_type, old)} to {_fmt(change_type, new)}"


class ChangeHistoryRecorder:
    """Audit trail for rate, salary and leave-quota edits on an employee profile."""

    def __init__(self, history: ChangeHistoryRepository, *, clock: Callable[[], date] = today_local):
        self._history = history
        self._clock = clock

    @staticmethod
    def diff(old: Employee, new: Employee, *, on: date) -> list[ChangeHistoryEntry]:
        entries: list[ChangeHistoryEntry] = []
        for change_type, attr in _TRACKED:
            before, after = getattr(old, attr), getattr(new, attr)
            if before == after:
                continue
            entries.append(
                ChangeHistoryEntry(
                    changed_on=on,
                    change_type=change_type,
                    description=describe_change(change_type, before, after),
                )
            )
        return entries

    def record_update(self, old: Employee, new: Employee, *, on: Optional[date] = None) -> list[ChangeHistoryEntry]:
        entries = self.diff(old, new, on=on or self._clock())
        for entry in entries:
            self._history.append(old.employee_id, entry)
        if entries:
            logger.info("Recorded %d profile change(s) for employee %s", len(entries), old.employee_id)
        return entries

    def history(self, employee_id: int) -> Sequence[ChangeHistoryEntry]:
        return self._history.list_for_employee(int(employee_id))
