from __future__ import annotations

from typing import Protocol, Sequence

from .model import ChangeHistoryEntry


class ChangeHistoryRepository(Protocol):
    def append(self, employee_id: int, entry: ChangeHistoryEntry) -> None:
        """Store a new entry after every existing one for the employee."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[ChangeHistoryEntry]:
        """Entries ordered most-recent-first (reverse insertion order)."""

        raise NotImplementedError
