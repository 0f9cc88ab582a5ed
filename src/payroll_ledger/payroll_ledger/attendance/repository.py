from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceDay


class AttendanceRepository(Protocol):
    """Store for AttendanceDay, at most one record per (employee_id, work_date)."""

    def get(self, employee_id: int, work_date: date) -> Optional[AttendanceDay]:
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceDay]:
        """Days for one employee, optionally limited to ``start..end`` inclusive."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceDay]:
        raise NotImplementedError

    def upsert(self, day: AttendanceDay) -> None:
        raise NotImplementedError

    def delete(self, employee_id: int, work_date: date) -> bool:
        raise NotImplementedError
