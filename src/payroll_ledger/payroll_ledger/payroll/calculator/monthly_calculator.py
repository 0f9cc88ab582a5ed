from __future__ import annotations

from .base import SalaryCalculator
from ...attendance.model import MonthlyAttendance
from ...core.exceptions import ValidationError
from ...employees.model import Employee


class MonthlySalaryCalculator(SalaryCalculator):
    """Fixed monthly salary plus overtime; leave is already covered by the fixed amount."""

    def monthly_salary(self, employee: Employee, attendance: MonthlyAttendance) -> float:
        if employee.fixed_monthly_salary is None:
            raise ValidationError(f"Employee {employee.employee_id} is monthly but has no fixed monthly salary")
        return employee.fixed_monthly_salary + attendance.overtime_hours * employee.overtime_rate
