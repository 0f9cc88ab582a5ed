from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import LeaveUsage
from .repository import LeaveUsageRepository


class MySQLLeaveUsageRepository(LeaveUsageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: int) -> LeaveUsage:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT days_used FROM leave_usage WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return LeaveUsage(employee_id=int(employee_id), days_used=int(r["days_used"]) if r else 0)

    def set(self, employee_id: int, days_used: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_usage(employee_id, days_used)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE days_used=VALUES(days_used)
                """,
                (int(employee_id), int(days_used)),
            )
