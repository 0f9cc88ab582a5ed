from __future__ import annotations

from flask import Flask

from ..common.http import month_args, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_month")
    def payroll_month():
        month, year = month_args()
        snapshots = svc.month_snapshots(month=month, year=year)
        summary = svc.month_summary(month=month, year=year)
        return ok([s.to_dict() for s in snapshots], summary=summary.to_dict())

    @app.route("/api/payroll/<int:employee_id>", methods=["GET"], endpoint="payroll_employee")
    def payroll_employee(employee_id: int):
        month, year = month_args()
        return ok(svc.snapshot(employee_id, month=month, year=year).to_dict())
