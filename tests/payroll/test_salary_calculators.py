from __future__ import annotations

import pytest

from payroll_ledger.attendance.model import MonthlyAttendance
from payroll_ledger.core.enums import CompensationModel
from payroll_ledger.core.exceptions import ValidationError
from payroll_ledger.employees.model import Employee
from payroll_ledger.payroll.calculator.factory import SalaryCalculatorFactory, compute_salary
from payroll_ledger.payroll.calculator.hourly_calculator import HourlySalaryCalculator
from payroll_ledger.payroll.calculator.monthly_calculator import MonthlySalaryCalculator


def _employee(model, *, hourly=0.0, overtime=0.0, fixed=None):
    return Employee(
        employee_id=1,
        full_name="A",
        model=model,
        hourly_rate=hourly,
        overtime_rate=overtime,
        fixed_monthly_salary=fixed,
        total_annual_leave_days=20,
    )


def _month(normal=0.0, overtime=0.0, leave_days=0):
    return MonthlyAttendance(
        employee_id=1, month=3, year=2025, normal_hours=normal, overtime_hours=overtime, leave_days=leave_days
    )


def test_hourly_pays_leave_days_as_eight_normal_hours():
    employee = _employee(CompensationModel.HOURLY, hourly=10, overtime=15)
    assert compute_salary(employee, _month(normal=20, overtime=4, leave_days=1)) == 340


def test_monthly_ignores_leave_and_normal_hours():
    employee = _employee(CompensationModel.MONTHLY, overtime=12, fixed=1200)
    assert compute_salary(employee, _month(normal=100, overtime=3, leave_days=2)) == 1236


def test_monthly_without_fixed_salary_is_rejected():
    employee = _employee(CompensationModel.MONTHLY, overtime=12, fixed=None)
    with pytest.raises(ValidationError):
        compute_salary(employee, _month(overtime=1))


def test_empty_month_pays_nothing_hourly_and_fixed_monthly():
    assert compute_salary(_employee(CompensationModel.HOURLY, hourly=10, overtime=15), _month()) == 0
    assert compute_salary(_employee(CompensationModel.MONTHLY, fixed=900), _month()) == 900


def test_factory_picks_calculator_by_model():
    factory = SalaryCalculatorFactory()
    assert isinstance(factory.for_employee(_employee(CompensationModel.HOURLY)), HourlySalaryCalculator)
    assert isinstance(factory.for_employee(_employee(CompensationModel.MONTHLY, fixed=1)), MonthlySalaryCalculator)


def test_same_inputs_give_same_salary():
    employee = _employee(CompensationModel.HOURLY, hourly=12.5, overtime=20)
    month = _month(normal=37.5, overtime=2.25, leave_days=3)
    assert compute_salary(employee, month) == compute_salary(employee, month)
