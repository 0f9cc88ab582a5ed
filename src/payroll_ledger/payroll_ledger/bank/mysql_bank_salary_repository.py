from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import BankSalaryEntry
from .repository import BankSalaryRepository


def _to_entry(r: dict) -> BankSalaryEntry:
    return BankSalaryEntry(
        entry_id=int(r["entry_id"]),
        employee_id=int(r["employee_id"]),
        month=int(r["month"]),
        year=int(r["year"]),
        amount=as_float(r["amount"]) or 0.0,
    )


class MySQLBankSalaryRepository(BankSalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, entry_id: int) -> Optional[BankSalaryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT entry_id, employee_id, month, year, amount FROM bank_salary_entries WHERE entry_id=%s",
                (int(entry_id),),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_for_month(self, *, month: int, year: int, employee_id: Optional[int] = None) -> Sequence[BankSalaryEntry]:
        clauses = ["month=%s", "year=%s"]
        params: list[object] = [int(month), int(year)]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT entry_id, employee_id, month, year, amount
                FROM bank_salary_entries
                WHERE {where}
                ORDER BY employee_id ASC, entry_id ASC
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def create(self, *, employee_id: int, month: int, year: int, amount: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO bank_salary_entries(employee_id, month, year, amount) VALUES(%s,%s,%s,%s)",
                (int(employee_id), int(month), int(year), float(amount)),
            )
            return int(cur.lastrowid)

    def update(self, entry: BankSalaryEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM bank_salary_entries WHERE entry_id=%s", (entry.entry_id,))
            if not fetchone(cur):
                return False
            cur.execute(
                """
                UPDATE bank_salary_entries
                SET employee_id=%s, month=%s, year=%s, amount=%s
                WHERE entry_id=%s
                """,
                (entry.employee_id, entry.month, entry.year, entry.amount, entry.entry_id),
            )
            return True

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM bank_salary_entries WHERE entry_id=%s", (int(entry_id),))
            return cur.rowcount > 0
