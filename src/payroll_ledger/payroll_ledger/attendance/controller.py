from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import bool_field, date_field, entry_object, int_field, json_body, list_field, ok
from ..container import Container
from ..core.exceptions import NotFoundError
from .model import AttendanceDay


def _day_from(raw, *, employee_id: Optional[int] = None, work_date: Optional[date] = None) -> AttendanceDay:
    data = entry_object(raw)
    return AttendanceDay(
        employee_id=employee_id if employee_id is not None else int_field(data, "employee_id"),
        work_date=work_date or date_field(data, "date"),
        normal_hours=data.get("normal_hours", 0) or 0,
        overtime_hours=data.get("overtime_hours", 0) or 0,
        is_leave=bool_field(data, "is_leave"),
        leave_type=data.get("leave_type"),
    )


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list(employee_id: int):
        container.employee_service.get_employee(employee_id)
        return ok([d.to_dict() for d in svc.list_days(employee_id)])

    @app.route("/api/employees/<int:employee_id>/attendance/<day>", methods=["GET"], endpoint="attendance_get")
    def attendance_get(employee_id: int, day: str):
        work_date = parse_iso_date(day)
        record = svc.get_day(employee_id, work_date)
        if not record:
            raise NotFoundError(f"No attendance for employee {employee_id} on {work_date.isoformat()}")
        return ok(record.to_dict())

    @app.route("/api/employees/<int:employee_id>/attendance/<day>", methods=["PUT"], endpoint="attendance_put")
    def attendance_put(employee_id: int, day: str):
        record = svc.record_day(_day_from(json_body(), employee_id=employee_id, work_date=parse_iso_date(day)))
        return ok(record.to_dict())

    @app.route("/api/employees/<int:employee_id>/attendance/<day>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(employee_id: int, day: str):
        svc.delete_day(employee_id, parse_iso_date(day))
        return ok({"employee_id": employee_id, "date": day})

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    def attendance_bulk():
        result = svc.record_days_bulk(list_field(json_body(), "entries"), parse=_day_from)
        return ok(result.to_dict())

    @app.route("/api/attendance/daily/<day>", methods=["GET"], endpoint="attendance_daily")
    def attendance_daily(day: str):
        return ok([d.to_dict() for d in svc.daily_entries(parse_iso_date(day))])

    @app.route("/api/attendance/daily/<day>", methods=["PUT"], endpoint="attendance_daily_save")
    def attendance_daily_save(day: str):
        work_date = parse_iso_date(day)
        result = svc.save_daily_bulk(
            work_date,
            list_field(json_body(), "entries"),
            parse=lambda raw: _day_from(raw, work_date=work_date),
        )
        return ok(result.to_dict())
