from __future__ import annotations

from dataclasses import dataclass

from ...attendance.model import MonthlyAttendance
from ...core.enums import CompensationModel
from ...employees.model import Employee
from .base import SalaryCalculator
from .hourly_calculator import HourlySalaryCalculator
from .monthly_calculator import MonthlySalaryCalculator


@dataclass
class SalaryCalculatorFactory:
    """Factory Pattern: choose the calculator for an employee's compensation model."""

    def for_employee(self, employee: Employee) -> SalaryCalculator:
        if employee.model == CompensationModel.MONTHLY:
            return MonthlySalaryCalculator()
        return HourlySalaryCalculator()


def compute_salary(employee: Employee, attendance: MonthlyAttendance) -> float:
    return SalaryCalculatorFactory().for_employee(employee).monthly_salary(employee, attendance)
