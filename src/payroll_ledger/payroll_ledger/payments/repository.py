from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PaymentKey, PaymentRecord


class PaymentRepository(Protocol):
    def get(self, key: PaymentKey) -> Optional[PaymentRecord]:
        raise NotImplementedError

    def list_for_month(self, *, month: int, year: int, employee_id: Optional[int] = None) -> Sequence[PaymentRecord]:
        raise NotImplementedError

    def upsert(self, record: PaymentRecord) -> None:
        """Insert, or replace the amounts of the record with the same key."""

        raise NotImplementedError

    def delete(self, key: PaymentKey) -> bool:
        raise NotImplementedError
