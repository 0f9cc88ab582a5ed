from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container

_PROFILE_FIELDS = (
    "full_name",
    "model",
    "hourly_rate",
    "overtime_rate",
    "fixed_monthly_salary",
    "total_annual_leave_days",
    "email",
    "phone",
    "bank_iban",
)


def _profile(data: dict) -> dict:
    return {name: data[name] for name in _PROFILE_FIELDS if name in data}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return ok([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        employee_id = container.employee_service.create_employee(**{"full_name": "", "model": "", **_profile(json_body())})
        return ok({"employee_id": employee_id}, status=201)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    def employees_get(employee_id: int):
        return ok(container.employee_service.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: int):
        employee = container.employee_service.update_employee(employee_id, **_profile(json_body()))
        return ok(employee.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: int):
        container.employee_service.delete_employee(employee_id)
        return ok({"employee_id": employee_id})

    @app.route("/api/employees/<int:employee_id>/history", methods=["GET"], endpoint="employees_history")
    def employees_history(employee_id: int):
        container.employee_service.get_employee(employee_id)
        return ok([entry.to_dict() for entry in container.history_recorder.history(employee_id)])
