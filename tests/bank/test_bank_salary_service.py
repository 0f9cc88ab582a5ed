from __future__ import annotations

import pytest

from payroll_ledger.core.enums import BulkStatus
from payroll_ledger.core.exceptions import NotFoundError, ValidationError


def test_bank_target_sums_entries_for_the_month(container, hire):
    emp = hire()
    bank = container.bank_service
    bank.add_entry(employee_id=emp, month=3, year=2025, amount=500)
    bank.add_entry(employee_id=emp, month=3, year=2025, amount=300)
    bank.add_entry(employee_id=emp, month=4, year=2025, amount=999)

    assert bank.bank_target(emp, month=3, year=2025) == 800
    assert bank.bank_target(emp, month=5, year=2025) == 0


def test_entries_need_positive_amount_valid_month_and_known_employee(container, hire):
    emp = hire()
    bank = container.bank_service
    with pytest.raises(ValidationError):
        bank.add_entry(employee_id=emp, month=3, year=2025, amount=0)
    with pytest.raises(ValidationError):
        bank.add_entry(employee_id=emp, month=13, year=2025, amount=10)
    with pytest.raises(NotFoundError):
        bank.add_entry(employee_id=999, month=3, year=2025, amount=10)


def test_update_and_delete_entry(container, hire):
    emp = hire()
    bank = container.bank_service
    entry_id = bank.add_entry(employee_id=emp, month=3, year=2025, amount=500)

    updated = bank.update_entry(entry_id, employee_id=emp, month=3, year=2025, amount=450)
    assert updated.amount == 450
    assert bank.bank_target(emp, month=3, year=2025) == 450

    bank.delete_entry(entry_id)
    assert bank.list_for_month(month=3, year=2025) == []
    with pytest.raises(NotFoundError):
        bank.delete_entry(entry_id)
    with pytest.raises(NotFoundError):
        bank.update_entry(entry_id, employee_id=emp, month=3, year=2025, amount=1)


def test_bulk_adds_one_entry_per_employee(container, hire):
    a, b = hire("A"), hire("B")
    result = container.bank_service.set_bulk(month=3, year=2025, amounts=[(a, 100), (b, -5), (b, 250)])

    assert result.status == BulkStatus.PARTIALLY_COMPLETED
    assert [item.key for item in result.items] == [str(a), str(b), str(b)]
    assert container.bank_service.bank_target(b, month=3, year=2025) == 250


def test_bulk_reports_non_numeric_employee_id_per_item(container, hire):
    emp = hire()
    result = container.bank_service.set_bulk(month=3, year=2025, amounts=[(emp, 100), ("abc", 50)])

    assert [item.ok for item in result.items] == [True, False]
    assert "Employee id" in result.items[1].error
    assert container.bank_service.bank_target(emp, month=3, year=2025) == 100
