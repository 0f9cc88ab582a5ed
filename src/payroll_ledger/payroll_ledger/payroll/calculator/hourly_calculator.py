from __future__ import annotations

from .base import SalaryCalculator
from ...attendance.model import MonthlyAttendance
from ...employees.model import Employee


class HourlySalaryCalculator(SalaryCalculator):
    """(normal hours + 8 per leave day) * hourly rate + overtime hours * overtime rate."""

    def monthly_salary(self, employee: Employee, attendance: MonthlyAttendance) -> float:
        paid_hours = attendance.normal_hours + attendance.leave_hours
        return paid_hours * employee.hourly_rate + attendance.overtime_hours * employee.overtime_rate
