from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import CompensationModel
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, full_name, model, hourly_rate, overtime_rate, fixed_monthly_salary,
    total_annual_leave_days, email, phone, bank_iban
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        model=CompensationModel(r["model"]),
        hourly_rate=as_float(r["hourly_rate"]) or 0.0,
        overtime_rate=as_float(r["overtime_rate"]) or 0.0,
        fixed_monthly_salary=as_float(r.get("fixed_monthly_salary")),
        total_annual_leave_days=int(r["total_annual_leave_days"]),
        email=r.get("email"),
        phone=r.get("phone"),
        bank_iban=r.get("bank_iban"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY full_name ASC, employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, draft: EmployeeDraft) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(full_name, model, hourly_rate, overtime_rate, fixed_monthly_salary,
                                      total_annual_leave_days, email, phone, bank_iban)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    draft.full_name,
                    draft.model.value,
                    draft.hourly_rate,
                    draft.overtime_rate,
                    draft.fixed_monthly_salary,
                    draft.total_annual_leave_days,
                    draft.email,
                    draft.phone,
                    draft.bank_iban,
                ),
            )
            employee_id = int(cur.lastrowid)
            cur.execute("INSERT INTO leave_usage(employee_id, days_used) VALUES(%s, 0)", (employee_id,))
            return employee_id

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM employees WHERE employee_id=%s", (employee.employee_id,))
            if not fetchone(cur):
                return False
            cur.execute(
                """
                UPDATE employees
                SET full_name=%s, model=%s, hourly_rate=%s, overtime_rate=%s, fixed_monthly_salary=%s,
                    total_annual_leave_days=%s, email=%s, phone=%s, bank_iban=%s
                WHERE employee_id=%s
                """,
                (
                    employee.full_name,
                    employee.model.value,
                    employee.hourly_rate,
                    employee.overtime_rate,
                    employee.fixed_monthly_salary,
                    employee.total_annual_leave_days,
                    employee.email,
                    employee.phone,
                    employee.bank_iban,
                    employee.employee_id,
                ),
            )
            return True

    def set_annual_leave_days_all(self, total_annual_leave_days: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET total_annual_leave_days=%s", (int(total_annual_leave_days),))
            return int(cur.rowcount)

    def delete_by_id(self, employee_id: int) -> bool:
        # Attendance, leave usage, bank salaries, payments and history go with it (ON DELETE CASCADE).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
