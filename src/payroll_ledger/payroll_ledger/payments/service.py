from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.bulk import BulkResult, run_bulk
from ..common.validators import require_month, require_non_negative
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import EmployeePayments, PaymentKey, PaymentRecord, PaymentTotals
from .repository import PaymentRepository


def sum_payments(records: Iterable[PaymentRecord]) -> PaymentTotals:
    cash = 0.0
    bank = 0.0
    for record in records:
        cash += record.cash_amount
        bank += record.bank_amount
    return PaymentTotals(cash=cash, bank=bank)


class PaymentService:
    """Use cases: cash/bank payments and their monthly totals."""

    def __init__(self, payments: PaymentRepository, employees: EmployeeRepository):
        self._payments = payments
        self._employees = employees

    def _validated(self, record: PaymentRecord) -> PaymentRecord:
        month, year = require_month(record.month, record.year)
        cash = require_non_negative(record.cash_amount, "Cash amount")
        bank = require_non_negative(record.bank_amount, "Bank amount")
        if cash == 0 and bank == 0:
            raise ValidationError("A payment needs a cash or bank amount")
        if not self._employees.get_by_id(int(record.employee_id)):
            raise NotFoundError(f"Employee {record.employee_id} does not exist")
        return PaymentRecord(
            employee_id=int(record.employee_id),
            month=month,
            year=year,
            payment_date=record.payment_date,
            cash_amount=cash,
            bank_amount=bank,
        )

    def add_payment(self, record: PaymentRecord) -> PaymentRecord:
        record = self._validated(record)
        if self._payments.get(record.key):
            raise ValidationError(f"A payment for {record.key} already exists; update it instead")
        self._payments.upsert(record)
        return record

    def add_payments_bulk(
        self, records: Iterable[Any], *, parse: Optional[Callable[[Any], PaymentRecord]] = None
    ) -> BulkResult:
        return run_bulk(
            list(records), key=lambda r: str(r.key), apply=self.add_payment, operation="add_payments_bulk", parse=parse
        )

    def update_payment(self, key: PaymentKey, record: PaymentRecord) -> PaymentRecord:
        """Replace the payment identified by ``key``; the key itself may change."""

        if not self._payments.get(key):
            raise NotFoundError(f"Payment {key} does not exist")
        record = self._validated(record)
        if record.key != key:
            if self._payments.get(record.key):
                raise ValidationError(f"A payment for {record.key} already exists")
            self._payments.delete(key)
        self._payments.upsert(record)
        return record

    def update_payments_bulk(
        self, records: Iterable[Any], *, parse: Optional[Callable[[Any], PaymentRecord]] = None
    ) -> BulkResult:
        """Upsert each record by its own key."""

        def apply(record: PaymentRecord) -> None:
            self._payments.upsert(self._validated(record))

        return run_bulk(
            list(records), key=lambda r: str(r.key), apply=apply, operation="update_payments_bulk", parse=parse
        )

    def delete_payment(self, key: PaymentKey) -> None:
        if not self._payments.delete(key):
            raise NotFoundError(f"Payment {key} does not exist")

    def list_payments(self, employee_id: int, *, month: int, year: int) -> Sequence[PaymentRecord]:
        month, year = require_month(month, year)
        records = self._payments.list_for_month(month=month, year=year, employee_id=int(employee_id))
        return sorted(records, key=lambda r: r.payment_date)

    def payment_totals(self, employee_id: int, *, month: int, year: int) -> PaymentTotals:
        """(Σ cash, Σ bank) over the employee's payments for the month."""

        return sum_payments(
            r for r in self.list_payments(employee_id, month=month, year=year) if r.employee_id == int(employee_id)
        )

    def month_overview(self, *, month: int, year: int) -> Sequence[EmployeePayments]:
        month, year = require_month(month, year)
        by_employee: dict[int, list[PaymentRecord]] = {}
        for record in self._payments.list_for_month(month=month, year=year):
            by_employee.setdefault(record.employee_id, []).append(record)

        out: list[EmployeePayments] = []
        for employee in self._employees.list_all():
            records = sorted(by_employee.get(employee.employee_id, []), key=lambda r: r.payment_date)
            out.append(
                EmployeePayments(
                    employee_id=employee.employee_id,
                    full_name=employee.full_name,
                    payments=tuple(records),
                    totals=sum_payments(records),
                )
            )
        out.sort(key=lambda p: (p.full_name.lower(), p.employee_id))
        return out
