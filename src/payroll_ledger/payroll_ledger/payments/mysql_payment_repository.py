from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall, fetchone
from .model import PaymentKey, PaymentRecord
from .repository import PaymentRepository

_KEY_WHERE = "employee_id=%s AND month=%s AND year=%s AND payment_date=%s"


def _key_params(key: PaymentKey) -> tuple:
    return (int(key.employee_id), int(key.month), int(key.year), key.payment_date)


def _to_record(r: dict) -> PaymentRecord:
    return PaymentRecord(
        employee_id=int(r["employee_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        payment_date=as_date(r["payment_date"]),
        cash_amount=as_float(r["cash_amount"]) or 0.0,
        bank_amount=as_float(r["bank_amount"]) or 0.0,
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: PaymentKey) -> Optional[PaymentRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, month, year, payment_date, cash_amount, bank_amount
                FROM payments
                WHERE {_KEY_WHERE}
                """,
                _key_params(key),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_month(self, *, month: int, year: int, employee_id: Optional[int] = None) -> Sequence[PaymentRecord]:
        clauses = ["month=%s", "year=%s"]
        params: list[object] = [int(month), int(year)]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, month, year, payment_date, cash_amount, bank_amount
                FROM payments
                WHERE {where}
                ORDER BY employee_id ASC, payment_date ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def upsert(self, record: PaymentRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(employee_id, month, year, payment_date, cash_amount, bank_amount)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE cash_amount=VALUES(cash_amount), bank_amount=VALUES(bank_amount)
                """,
                (*_key_params(record.key), record.cash_amount, record.bank_amount),
            )

    def delete(self, key: PaymentKey) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM payments WHERE {_KEY_WHERE}", _key_params(key))
            return cur.rowcount > 0
