from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from payroll_ledger.attendance.model import AttendanceDay
from payroll_ledger.bank.model import BankSalaryEntry
from payroll_ledger.container import wire_container
from payroll_ledger.employees.model import Employee, EmployeeDraft
from payroll_ledger.history.model import ChangeHistoryEntry
from payroll_ledger.leave.model import LeaveUsage
from payroll_ledger.main import create_app
from payroll_ledger.payments.model import PaymentKey, PaymentRecord


class MemoryStore:
    """Shared tables for the fake repositories; deleting an employee cascades."""

    def __init__(self):
        self.employees: dict[int, Employee] = {}
        self.days: dict[tuple[int, date], AttendanceDay] = {}
        self.leave_used: dict[int, int] = {}
        self.bank: dict[int, BankSalaryEntry] = {}
        self.payments: dict[PaymentKey, PaymentRecord] = {}
        self.history: dict[int, list[ChangeHistoryEntry]] = {}
        self._next_employee = 1
        self._next_entry = 1

    def drop_employee(self, employee_id: int) -> None:
        self.employees.pop(employee_id, None)
        self.leave_used.pop(employee_id, None)
        self.history.pop(employee_id, None)
        self.days = {k: v for k, v in self.days.items() if k[0] != employee_id}
        self.bank = {k: v for k, v in self.bank.items() if v.employee_id != employee_id}
        self.payments = {k: v for k, v in self.payments.items() if k.employee_id != employee_id}


class FakeEmployeesRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def get_by_id(self, employee_id):
        return self._s.employees.get(int(employee_id))

    def list_all(self):
        return list(self._s.employees.values())

    def create(self, draft: EmployeeDraft):
        employee_id = self._s._next_employee
        self._s._next_employee += 1
        self._s.employees[employee_id] = Employee(employee_id=employee_id, **vars(draft))
        self._s.leave_used[employee_id] = 0
        return employee_id

    def update(self, employee):
        if employee.employee_id not in self._s.employees:
            return False
        self._s.employees[employee.employee_id] = employee
        return True

    def set_annual_leave_days_all(self, total_annual_leave_days):
        for employee_id, employee in self._s.employees.items():
            self._s.employees[employee_id] = replace(employee, total_annual_leave_days=total_annual_leave_days)
        return len(self._s.employees)

    def delete_by_id(self, employee_id):
        if int(employee_id) not in self._s.employees:
            return False
        self._s.drop_employee(int(employee_id))
        return True


class FakeAttendanceRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def get(self, employee_id, work_date):
        return self._s.days.get((int(employee_id), work_date))

    def list_for_employee(self, employee_id, *, start=None, end=None):
        return [
            d
            for (eid, day), d in self._s.days.items()
            if eid == int(employee_id) and (start is None or day >= start) and (end is None or day <= end)
        ]

    def list_for_date(self, work_date):
        return [d for (_, day), d in self._s.days.items() if day == work_date]

    def upsert(self, day):
        self._s.days[(day.employee_id, day.work_date)] = day

    def delete(self, employee_id, work_date):
        return self._s.days.pop((int(employee_id), work_date), None) is not None


class FakeLeaveRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def get(self, employee_id):
        return LeaveUsage(employee_id=int(employee_id), days_used=self._s.leave_used.get(int(employee_id), 0))

    def set(self, employee_id, days_used):
        self._s.leave_used[int(employee_id)] = int(days_used)


class FakeBankRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def get(self, entry_id):
        return self._s.bank.get(int(entry_id))

    def list_for_month(self, *, month, year, employee_id=None):
        return [
            e
            for e in self._s.bank.values()
            if e.month == month and e.year == year and (employee_id is None or e.employee_id == employee_id)
        ]

    def create(self, *, employee_id, month, year, amount):
        entry_id = self._s._next_entry
        self._s._next_entry += 1
        self._s.bank[entry_id] = BankSalaryEntry(
            entry_id=entry_id, employee_id=employee_id, month=month, year=year, amount=amount
        )
        return entry_id

    def update(self, entry):
        if entry.entry_id not in self._s.bank:
            return False
        self._s.bank[entry.entry_id] = entry
        return True

    def delete(self, entry_id):
        return self._s.bank.pop(int(entry_id), None) is not None


class FakePaymentsRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def get(self, key):
        return self._s.payments.get(key)

    def list_for_month(self, *, month, year, employee_id=None):
        return [
            p
            for p in self._s.payments.values()
            if p.month == month and p.year == year and (employee_id is None or p.employee_id == employee_id)
        ]

    def upsert(self, record):
        self._s.payments[record.key] = record

    def delete(self, key):
        return self._s.payments.pop(key, None) is not None


class FakeHistoryRepo:
    def __init__(self, store: MemoryStore):
        self._s = store

    def append(self, employee_id, entry):
        self._s.history.setdefault(int(employee_id), []).append(entry)

    def list_for_employee(self, employee_id):
        return list(reversed(self._s.history.get(int(employee_id), [])))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def container(store):
    return wire_container(
        employees_repo=FakeEmployeesRepo(store),
        attendance_repo=FakeAttendanceRepo(store),
        leave_repo=FakeLeaveRepo(store),
        bank_repo=FakeBankRepo(store),
        payments_repo=FakePaymentsRepo(store),
        history_repo=FakeHistoryRepo(store),
    )


@pytest.fixture
def hire(container):
    """Create an employee through the service and return its id."""

    def _hire(full_name="Ana", model="hourly", **fields):
        return container.employee_service.create_employee(full_name=full_name, model=model, **fields)

    return _hire


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
