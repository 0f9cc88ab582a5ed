from __future__ import annotations

from datetime import date

import pytest

from payroll_ledger.attendance.model import AttendanceDay
from payroll_ledger.attendance.service import build_day
from payroll_ledger.core.enums import BulkStatus
from payroll_ledger.core.exceptions import NotFoundError, ValidationError

D1 = date(2025, 3, 3)
D2 = date(2025, 3, 4)


def test_build_day_rejects_negative_and_oversized_hours():
    with pytest.raises(ValidationError):
        build_day(employee_id=1, work_date=D1, normal_hours=-1)
    with pytest.raises(ValidationError):
        build_day(employee_id=1, work_date=D1, overtime_hours=25)
    with pytest.raises(ValidationError):
        build_day(employee_id=1, work_date=D1, normal_hours="abc")


def test_build_day_canonicalizes_leave_and_drops_leave_type_on_work_days():
    leave = build_day(employee_id=1, work_date=D1, normal_hours=3, overtime_hours=2, is_leave=True, leave_type=" sick ")
    assert (leave.normal_hours, leave.overtime_hours, leave.leave_type) == (8, 0, "sick")

    worked = build_day(employee_id=1, work_date=D1, normal_hours=8, leave_type="sick")
    assert worked.leave_type is None
    assert worked.is_canonical


def test_record_day_overwrites_same_date(container, store, hire):
    emp = hire()
    svc = container.attendance_service
    svc.record_day(AttendanceDay(emp, D1, normal_hours=8))
    svc.record_day(AttendanceDay(emp, D1, normal_hours=6, overtime_hours=1))

    assert len(svc.list_days(emp)) == 1
    assert svc.get_day(emp, D1).normal_hours == 6


def test_record_day_moves_leave_counter_both_ways(container, store, hire):
    emp = hire()
    svc = container.attendance_service
    svc.record_day(AttendanceDay(emp, D1, is_leave=True))
    assert store.leave_used[emp] == 1
    svc.record_day(AttendanceDay(emp, D1, normal_hours=8))
    assert store.leave_used[emp] == 0


def test_record_day_for_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.record_day(AttendanceDay(42, D1, normal_hours=8))


def test_update_and_delete_require_an_existing_day(container, hire):
    emp = hire()
    svc = container.attendance_service
    with pytest.raises(NotFoundError):
        svc.update_day(AttendanceDay(emp, D1, normal_hours=8))
    with pytest.raises(NotFoundError):
        svc.delete_day(emp, D1)


def test_delete_leave_day_through_service_gives_day_back(container, store, hire):
    emp = hire()
    svc = container.attendance_service
    svc.record_day(AttendanceDay(emp, D1, is_leave=True))
    svc.delete_day(emp, D1)
    assert store.leave_used[emp] == 0
    assert svc.get_day(emp, D1) is None


def test_bulk_days_continue_past_failures(container, store, hire):
    emp = hire()
    result = container.attendance_service.record_days_bulk(
        [
            AttendanceDay(emp, D1, normal_hours=8),
            AttendanceDay(emp, D2, normal_hours=-2),
            AttendanceDay(emp, date(2025, 3, 5), normal_hours=3, overtime_hours=4, is_leave=True),
        ]
    )

    assert result.status == BulkStatus.PARTIALLY_COMPLETED
    assert (result.succeeded, result.failed) == (2, 1)
    assert result.items[1].key == f"{emp}@2025-03-04"
    assert store.days[(emp, date(2025, 3, 5))].normal_hours == 8
    assert store.leave_used[emp] == 1


def test_daily_bulk_forces_the_date(container, store, hire):
    a, b = hire("A"), hire("B")
    result = container.attendance_service.save_daily_bulk(
        D1,
        [AttendanceDay(a, D2, normal_hours=7), AttendanceDay(b, D1, overtime_hours=2)],
    )

    assert result.status == BulkStatus.COMPLETED
    assert [d.employee_id for d in container.attendance_service.daily_entries(D1)] == [a, b]
    assert container.attendance_service.daily_entries(D2) == []


def test_all_failed_bulk_is_failed(container):
    result = container.attendance_service.record_days_bulk([AttendanceDay(1, D1, normal_hours=8)])
    assert result.status == BulkStatus.FAILED
    assert result.to_dict()["items"][0]["ok"] is False
