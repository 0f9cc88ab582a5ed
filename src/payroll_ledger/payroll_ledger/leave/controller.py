from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import date_field, json_body, list_field, ok, required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    ledger = container.leave_ledger

    @app.route("/api/leave", methods=["GET"], endpoint="leave_list")
    def leave_list():
        return ok([b.to_dict() for b in ledger.list_balances()])

    @app.route("/api/leave/<int:employee_id>", methods=["GET"], endpoint="leave_get")
    def leave_get(employee_id: int):
        return ok(ledger.get_balance(employee_id).to_dict())

    @app.route("/api/leave/<int:employee_id>/toggle", methods=["POST"], endpoint="leave_toggle")
    def leave_toggle(employee_id: int):
        data = json_body()
        day = ledger.toggle_leave(employee_id, date_field(data, "date"), leave_type=data.get("leave_type"))
        return ok({"day": day.to_dict(), "balance": ledger.get_balance(employee_id).to_dict()})

    @app.route("/api/leave/bulk", methods=["POST"], endpoint="leave_bulk")
    def leave_bulk():
        data = json_body()
        result = ledger.bulk_add_leave(
            date_field(data, "date"),
            list_field(data, "employee_ids"),
            leave_type=data.get("leave_type"),
        )
        return ok(result.to_dict())

    @app.route("/api/leave/<int:employee_id>/used", methods=["PUT"], endpoint="leave_set_used")
    def leave_set_used(employee_id: int):
        balance = ledger.set_used_days(employee_id, required(json_body(), "days_used"))
        return ok(balance.to_dict())

    @app.route("/api/leave/<int:employee_id>/days/<day>", methods=["DELETE"], endpoint="leave_delete_day")
    def leave_delete_day(employee_id: int, day: str):
        deleted = ledger.delete_leave_day(employee_id, parse_iso_date(day))
        return ok({"deleted": deleted, "balance": ledger.get_balance(employee_id).to_dict()})

    @app.route("/api/leave/reset", methods=["POST"], endpoint="leave_reset_all")
    def leave_reset_all():
        count = ledger.reset_all(required(json_body(), "annual_quota"))
        return ok({"employees": count})

    @app.route("/api/leave/<int:employee_id>/reset", methods=["POST"], endpoint="leave_reset_employee")
    def leave_reset_employee(employee_id: int):
        balance = ledger.reset_employee(employee_id, required(json_body(), "annual_quota"))
        return ok(balance.to_dict())
