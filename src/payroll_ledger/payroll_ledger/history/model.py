from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_history_date
from ..core.enums import ChangeType


@dataclass(frozen=True)
class ChangeHistoryEntry:
    """Audit entry for one changed profile field. Append-only."""

    changed_on: date
    change_type: ChangeType
    description: str

    def to_dict(self) -> dict:
        return {
            "date": format_history_date(self.changed_on),
            "change_type": self.change_type.value,
            "description": self.description,
        }
