from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import MonthlyAttendance
from ...employees.model import Employee


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    Implementations return unrounded amounts; rounding is a display concern.
    """

    @abstractmethod
    def monthly_salary(self, employee: Employee, attendance: MonthlyAttendance) -> float:
        raise NotImplementedError
