from __future__ import annotations

from typing import Protocol

from .model import LeaveUsage


class LeaveUsageRepository(Protocol):
    def get(self, employee_id: int) -> LeaveUsage:
        """Usage counter for the employee; zero usage when none is stored."""

        raise NotImplementedError

    def set(self, employee_id: int, days_used: int) -> None:
        raise NotImplementedError
