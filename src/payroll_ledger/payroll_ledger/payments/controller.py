from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import date_field, entry_object, int_field, json_body, list_field, month_args, ok
from ..container import Container
from .model import PaymentKey, PaymentRecord


def _record(raw) -> PaymentRecord:
    data = entry_object(raw)
    return PaymentRecord(
        employee_id=int_field(data, "employee_id"),
        month=int_field(data, "month"),
        year=int_field(data, "year"),
        payment_date=date_field(data, "payment_date"),
        cash_amount=data.get("cash_amount", 0) or 0,
        bank_amount=data.get("bank_amount", 0) or 0,
    )


def register(app: Flask, container: Container) -> None:
    svc = container.payment_service

    @app.route("/api/payments", methods=["GET"], endpoint="payments_overview")
    def payments_overview():
        month, year = month_args()
        return ok([p.to_dict() for p in svc.month_overview(month=month, year=year)])

    @app.route("/api/employees/<int:employee_id>/payments", methods=["GET"], endpoint="payments_list")
    def payments_list(employee_id: int):
        month, year = month_args()
        records = svc.list_payments(employee_id, month=month, year=year)
        totals = svc.payment_totals(employee_id, month=month, year=year)
        return ok([r.to_dict() for r in records], total_cash=totals.cash, total_bank=totals.bank)

    @app.route("/api/payments", methods=["POST"], endpoint="payments_create")
    def payments_create():
        return ok(svc.add_payment(_record(json_body())).to_dict(), status=201)

    @app.route("/api/payments/bulk", methods=["POST"], endpoint="payments_bulk_add")
    def payments_bulk_add():
        return ok(svc.add_payments_bulk(list_field(json_body(), "payments"), parse=_record).to_dict())

    @app.route("/api/payments/bulk", methods=["PUT"], endpoint="payments_bulk_update")
    def payments_bulk_update():
        return ok(svc.update_payments_bulk(list_field(json_body(), "payments"), parse=_record).to_dict())

    @app.route(
        "/api/payments/<int:employee_id>/<int:year>/<int:month>/<day>",
        methods=["PUT", "DELETE"],
        endpoint="payments_item",
    )
    def payments_item(employee_id: int, year: int, month: int, day: str):
        key = PaymentKey(employee_id=employee_id, month=month, year=year, payment_date=parse_iso_date(day))
        if request.method == "DELETE":
            svc.delete_payment(key)
            return ok({"deleted": str(key)})
        return ok(svc.update_payment(key, _record(json_body())).to_dict())
