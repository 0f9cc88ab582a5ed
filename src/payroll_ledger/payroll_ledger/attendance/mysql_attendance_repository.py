from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, as_float, db_cursor, fetchall, fetchone
from .model import AttendanceDay
from .repository import AttendanceRepository


def _to_day(r: dict) -> AttendanceDay:
    return AttendanceDay(
        employee_id=int(r["employee_id"]),
        work_date=as_date(r["work_date"]),
        normal_hours=as_float(r["normal_hours"]) or 0.0,
        overtime_hours=as_float(r["overtime_hours"]) or 0.0,
        is_leave=bool(r["is_leave"]),
        leave_type=r.get("leave_type"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: int, work_date: date) -> Optional[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, normal_hours, overtime_hours, is_leave, leave_type
                FROM attendance_days
                WHERE employee_id=%s AND work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_day(r) if r else None

    def list_for_employee(
        self,
        employee_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceDay]:
        clauses = ["employee_id=%s"]
        params: list[object] = [int(employee_id)]
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT employee_id, work_date, normal_hours, overtime_hours, is_leave, leave_type
                FROM attendance_days
                WHERE {where}
                ORDER BY work_date ASC
                """,
                tuple(params),
            )
            return [_to_day(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[AttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, normal_hours, overtime_hours, is_leave, leave_type
                FROM attendance_days
                WHERE work_date=%s
                ORDER BY employee_id ASC
                """,
                (work_date,),
            )
            return [_to_day(r) for r in fetchall(cur)]

    def upsert(self, day: AttendanceDay) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_days(employee_id, work_date, normal_hours, overtime_hours, is_leave, leave_type)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    normal_hours=VALUES(normal_hours),
                    overtime_hours=VALUES(overtime_hours),
                    is_leave=VALUES(is_leave),
                    leave_type=VALUES(leave_type)
                """,
                (
                    day.employee_id,
                    day.work_date,
                    day.normal_hours,
                    day.overtime_hours,
                    1 if day.is_leave else 0,
                    day.leave_type,
                ),
            )

    def delete(self, employee_id: int, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance_days WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            return cur.rowcount > 0
