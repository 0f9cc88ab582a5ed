from __future__ import annotations

from flask import Flask

from ..common.http import entry_object, int_field, json_body, list_field, month_args, ok, optional_int_arg, required
from ..container import Container


def _amount(raw) -> tuple[int, float]:
    data = entry_object(raw)
    return int_field(data, "employee_id"), required(data, "amount")


def register(app: Flask, container: Container) -> None:
    svc = container.bank_service

    @app.route("/api/bank-salaries", methods=["GET"], endpoint="bank_list")
    def bank_list():
        month, year = month_args()
        entries = svc.list_for_month(month=month, year=year, employee_id=optional_int_arg("employee_id"))
        return ok([e.to_dict() for e in entries])

    @app.route("/api/bank-salaries", methods=["POST"], endpoint="bank_create")
    def bank_create():
        data = json_body()
        entry_id = svc.add_entry(
            employee_id=required(data, "employee_id"),
            month=required(data, "month"),
            year=required(data, "year"),
            amount=required(data, "amount"),
        )
        return ok({"entry_id": entry_id}, status=201)

    @app.route("/api/bank-salaries/<int:entry_id>", methods=["PUT"], endpoint="bank_update")
    def bank_update(entry_id: int):
        data = json_body()
        entry = svc.update_entry(
            entry_id,
            employee_id=required(data, "employee_id"),
            month=required(data, "month"),
            year=required(data, "year"),
            amount=required(data, "amount"),
        )
        return ok(entry.to_dict())

    @app.route("/api/bank-salaries/<int:entry_id>", methods=["DELETE"], endpoint="bank_delete")
    def bank_delete(entry_id: int):
        svc.delete_entry(entry_id)
        return ok({"entry_id": entry_id})

    @app.route("/api/bank-salaries/bulk", methods=["POST"], endpoint="bank_bulk")
    def bank_bulk():
        data = json_body()
        result = svc.set_bulk(
            month=required(data, "month"),
            year=required(data, "year"),
            amounts=list_field(data, "amounts"),
            parse=_amount,
        )
        return ok(result.to_dict())
