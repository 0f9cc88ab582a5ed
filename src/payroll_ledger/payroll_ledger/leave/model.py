from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LeaveUsage:
    employee_id: int
    days_used: int = 0


@dataclass(frozen=True)
class LeaveBalance:
    """Read-model: quota vs. used leave for one employee."""

    employee_id: int
    full_name: str
    total_annual_leave_days: int
    days_used: int

    @property
    def remaining(self) -> int:
        return max(0, self.total_annual_leave_days - self.days_used)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "total_annual_leave_days": self.total_annual_leave_days,
            "days_used": self.days_used,
            "remaining": self.remaining,
        }
