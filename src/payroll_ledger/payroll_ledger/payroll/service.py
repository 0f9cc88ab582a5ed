from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.aggregator import AttendanceAggregator
from ..bank.service import BankSalaryService
from ..common.validators import require_month
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payments.service import PaymentService
from .calculator.factory import SalaryCalculatorFactory
from .model import PayrollSnapshot, PayrollSummary
from .reconciler import reconcile

logger = logging.getLogger(__name__)


class PayrollService:
    """Builds PayrollSnapshot from the authoritative records on every call."""

    def __init__(
        self,
        employees: EmployeeRepository,
        aggregator: AttendanceAggregator,
        bank: BankSalaryService,
        payments: PaymentService,
        *,
        calculators: Optional[SalaryCalculatorFactory] = None,
    ):
        self._employees = employees
        self._aggregator = aggregator
        self._bank = bank
        self._payments = payments
        self._calculators = calculators or SalaryCalculatorFactory()

    def _build(self, employee: Employee, *, month: int, year: int) -> PayrollSnapshot:
        attendance = self._aggregator.aggregate(employee.employee_id, month=month, year=year)
        salary = self._calculators.for_employee(employee).monthly_salary(employee, attendance)
        bank_target = self._bank.bank_target(employee.employee_id, month=month, year=year)
        totals = self._payments.payment_totals(employee.employee_id, month=month, year=year)
        balances = reconcile(total_monthly_salary=salary, bank_target=bank_target, payments=totals)

        return PayrollSnapshot(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            model=employee.model,
            month=month,
            year=year,
            normal_hours=attendance.normal_hours,
            overtime_hours=attendance.overtime_hours,
            leave_days=attendance.leave_days,
            total_monthly_salary=salary,
            monthly_bank_target=bank_target,
            total_cash_payments=totals.cash,
            total_bank_payments=totals.bank,
            remaining_salary_balance=balances.remaining_salary_balance,
            remaining_bank_balance=balances.remaining_bank_balance,
        )

    def snapshot(self, employee_id: int, *, month: int, year: int) -> PayrollSnapshot:
        month, year = require_month(month, year)
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return self._build(employee, month=month, year=year)

    def month_snapshots(self, *, month: int, year: int) -> Sequence[PayrollSnapshot]:
        month, year = require_month(month, year)
        employees = sorted(self._employees.list_all(), key=lambda e: (e.full_name.lower(), e.employee_id))
        return [self._build(e, month=month, year=year) for e in employees]

    def month_summary(self, *, month: int, year: int) -> PayrollSummary:
        """Totals across employees; ``outstanding`` ignores overpaid balances."""

        snapshots = self.month_snapshots(month=month, year=year)
        summary = PayrollSummary(
            month=int(month),
            year=int(year),
            employees=len(snapshots),
            total_salary=sum((s.total_monthly_salary for s in snapshots), 0.0),
            total_cash_payments=sum((s.total_cash_payments for s in snapshots), 0.0),
            total_bank_payments=sum((s.total_bank_payments for s in snapshots), 0.0),
            outstanding=sum((max(0.0, s.remaining_salary_balance) for s in snapshots), 0.0),
        )
        logger.debug("Payroll summary %s-%02d: %d employee(s)", summary.year, summary.month, summary.employees)
        return summary
