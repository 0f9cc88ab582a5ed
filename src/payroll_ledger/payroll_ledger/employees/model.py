from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import CompensationModel


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee profile with its compensation terms.

    Note: plain data object (no DB access code).
    """

    employee_id: int
    full_name: str
    model: CompensationModel
    hourly_rate: float
    overtime_rate: float
    fixed_monthly_salary: Optional[float]
    total_annual_leave_days: int
    email: Optional[str] = None
    phone: Optional[str] = None
    bank_iban: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "model": self.model.value,
            "hourly_rate": self.hourly_rate,
            "overtime_rate": self.overtime_rate,
            "fixed_monthly_salary": self.fixed_monthly_salary,
            "total_annual_leave_days": self.total_annual_leave_days,
            "email": self.email,
            "phone": self.phone,
            "bank_iban": self.bank_iban,
        }


@dataclass(frozen=True)
class EmployeeDraft:
    """Validated input for creating or replacing an employee profile."""

    full_name: str
    model: CompensationModel
    hourly_rate: float
    overtime_rate: float
    fixed_monthly_salary: Optional[float]
    total_annual_leave_days: int
    email: Optional[str] = None
    phone: Optional[str] = None
    bank_iban: Optional[str] = None
