from __future__ import annotations

from datetime import date

import pytest

from payroll_ledger.attendance.model import AttendanceDay
from payroll_ledger.core.exceptions import NotFoundError, ValidationError
from payroll_ledger.payments.model import PaymentRecord


def _payment(emp, day, cash=0.0, bank=0.0):
    return PaymentRecord(
        employee_id=emp, month=3, year=2025, payment_date=date(2025, 3, day), cash_amount=cash, bank_amount=bank
    )


def test_snapshot_combines_attendance_bank_and_payments(container, hire):
    emp = hire("Ana", hourly_rate=10, overtime_rate=15)
    container.attendance_service.record_day(AttendanceDay(emp, date(2025, 3, 3), normal_hours=8, overtime_hours=4))
    container.attendance_service.record_day(AttendanceDay(emp, date(2025, 3, 4), normal_hours=12))
    container.leave_ledger.toggle_leave(emp, date(2025, 3, 5))
    container.bank_service.add_entry(employee_id=emp, month=3, year=2025, amount=500)
    container.bank_service.add_entry(employee_id=emp, month=3, year=2025, amount=300)
    container.payment_service.add_payment(_payment(emp, 10, bank=200))
    container.payment_service.add_payment(_payment(emp, 11, cash=40))

    snap = container.payroll_service.snapshot(emp, month=3, year=2025)

    assert (snap.normal_hours, snap.overtime_hours, snap.leave_days) == (20, 4, 1)
    assert snap.total_monthly_salary == 340
    assert snap.monthly_bank_target == 800
    assert snap.remaining_bank_balance == 600
    assert snap.remaining_salary_balance == 340 - 40 - 200
    assert snap.remaining_salary_balance == (
        snap.total_monthly_salary - snap.total_cash_payments - snap.total_bank_payments
    )


def test_snapshot_reflects_later_writes(container, hire):
    emp = hire("Mo", model="monthly", fixed_monthly_salary=1200, overtime_rate=12)
    before = container.payroll_service.snapshot(emp, month=3, year=2025)
    container.attendance_service.record_day(AttendanceDay(emp, date(2025, 3, 3), overtime_hours=3))
    after = container.payroll_service.snapshot(emp, month=3, year=2025)

    assert before.total_monthly_salary == 1200
    assert after.total_monthly_salary == 1236


def test_snapshot_errors(container, hire):
    with pytest.raises(NotFoundError):
        container.payroll_service.snapshot(1, month=3, year=2025)
    emp = hire()
    with pytest.raises(ValidationError):
        container.payroll_service.snapshot(emp, month=0, year=2025)


def test_month_summary_outstanding_ignores_overpaid(container, hire):
    a = hire("A", hourly_rate=10)
    b = hire("B", model="monthly", fixed_monthly_salary=100)
    container.attendance_service.record_day(AttendanceDay(a, date(2025, 3, 3), normal_hours=10))
    container.payment_service.add_payment(_payment(a, 10, cash=30))
    container.payment_service.add_payment(_payment(b, 10, cash=150))

    snapshots = container.payroll_service.month_snapshots(month=3, year=2025)
    summary = container.payroll_service.month_summary(month=3, year=2025)

    assert [s.remaining_salary_balance for s in snapshots] == [70, -50]
    assert summary.employees == 2
    assert summary.total_salary == 200
    assert summary.total_cash_payments == 180
    assert summary.outstanding == 70
