from __future__ import annotations

from enum import Enum


class CompensationModel(str, Enum):
    """How an employee's monthly salary is derived."""

    HOURLY = "hourly"
    MONTHLY = "monthly"


class ChangeType(str, Enum):
    """Employee profile fields tracked by the change history."""

    HOURLY_RATE = "hourlyRate"
    OVERTIME_RATE = "overtimeRate"
    FIXED_MONTHLY_SALARY = "fixedMonthlySalary"
    TOTAL_ANNUAL_LEAVE_DAYS = "totalAnnualLeaveDays"


class BulkStatus(str, Enum):
    """Overall outcome of a best-effort bulk operation."""

    COMPLETED = "completed"
    PARTIALLY_COMPLETED = "partially_completed"
    FAILED = "failed"
