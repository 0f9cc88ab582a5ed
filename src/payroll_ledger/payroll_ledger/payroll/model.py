from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CompensationModel


@dataclass(frozen=True)
class PayrollSnapshot:
    """Derived monthly payroll picture for one employee. Never persisted."""

    employee_id: int
    full_name: str
    model: CompensationModel
    month: int
    year: int
    normal_hours: float
    overtime_hours: float
    leave_days: int
    total_monthly_salary: float
    monthly_bank_target: float
    total_cash_payments: float
    total_bank_payments: float
    remaining_salary_balance: float
    remaining_bank_balance: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "model": self.model.value,
            "month": self.month,
            "year": self.year,
            "normal_hours": self.normal_hours,
            "overtime_hours": self.overtime_hours,
            "leave_days": self.leave_days,
            "total_monthly_salary": self.total_monthly_salary,
            "monthly_bank_target": self.monthly_bank_target,
            "total_cash_payments": self.total_cash_payments,
            "total_bank_payments": self.total_bank_payments,
            "remaining_salary_balance": self.remaining_salary_balance,
            "remaining_bank_balance": self.remaining_bank_balance,
        }


@dataclass(frozen=True)
class PayrollSummary:
    month: int
    year: int
    employees: int
    total_salary: float
    total_cash_payments: float
    total_bank_payments: float
    outstanding: float

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "employees": self.employees,
            "total_salary": self.total_salary,
            "total_cash_payments": self.total_cash_payments,
            "total_bank_payments": self.total_bank_payments,
            "outstanding": self.outstanding,
        }
