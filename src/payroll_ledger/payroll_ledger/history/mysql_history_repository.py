from __future__ import annotations

from typing import Sequence

from ..core.enums import ChangeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall
from .model import ChangeHistoryEntry
from .repository import ChangeHistoryRepository


class MySQLChangeHistoryRepository(ChangeHistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, employee_id: int, entry: ChangeHistoryEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO change_history(employee_id, changed_on, change_type, description)
                VALUES(%s,%s,%s,%s)
                """,
                (int(employee_id), entry.changed_on, entry.change_type.value, entry.description),
            )

    def list_for_employee(self, employee_id: int) -> Sequence[ChangeHistoryEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT changed_on, change_type, description
                FROM change_history
                WHERE employee_id=%s
                ORDER BY history_id DESC
                """,
                (int(employee_id),),
            )
            return [
                ChangeHistoryEntry(
                    changed_on=as_date(r["changed_on"]),
                    change_type=ChangeType(r["change_type"]),
                    description=r["description"],
                )
                for r in fetchall(cur)
            ]
