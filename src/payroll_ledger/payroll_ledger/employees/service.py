from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty, require_non_negative, require_non_negative_int
from ..core.constants import DEFAULT_ANNUAL_LEAVE_DAYS
from ..core.enums import CompensationModel
from ..core.exceptions import NotFoundError, ValidationError
from ..history.recorder import ChangeHistoryRecorder
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def parse_model(value) -> CompensationModel:
    if isinstance(value, CompensationModel):
        return value
    try:
        return CompensationModel(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError("Compensation model must be 'hourly' or 'monthly'")


def build_draft(
    *,
    full_name: str,
    model,
    hourly_rate: float = 0.0,
    overtime_rate: float = 0.0,
    fixed_monthly_salary: Optional[float] = None,
    total_annual_leave_days: Optional[int] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    bank_iban: Optional[str] = None,
) -> EmployeeDraft:
    """Validate raw profile fields into an EmployeeDraft."""

    model = parse_model(model)
    fixed = None
    if fixed_monthly_salary is not None and fixed_monthly_salary != "":
        fixed = require_non_negative(fixed_monthly_salary, "Fixed monthly salary")
    if model == CompensationModel.MONTHLY and fixed is None:
        raise ValidationError("Fixed monthly salary is required for monthly employees")

    quota = DEFAULT_ANNUAL_LEAVE_DAYS if total_annual_leave_days is None else total_annual_leave_days

    return EmployeeDraft(
        full_name=require_non_empty(full_name, "Full name"),
        model=model,
        hourly_rate=require_non_negative(hourly_rate, "Hourly rate"),
        overtime_rate=require_non_negative(overtime_rate, "Overtime rate"),
        fixed_monthly_salary=fixed,
        total_annual_leave_days=require_non_negative_int(quota, "Annual leave days"),
        email=optional_text(email),
        phone=optional_text(phone),
        bank_iban=optional_text(bank_iban),
    )


class EmployeeService:
    """Use case: manage employee profiles."""

    def __init__(self, employees: EmployeeRepository, recorder: ChangeHistoryRecorder):
        self._employees = employees
        self._recorder = recorder

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return sorted(self._employees.list_all(), key=lambda e: (e.full_name.lower(), e.employee_id))

    def create_employee(self, **fields) -> int:
        draft = build_draft(**fields)
        employee_id = self._employees.create(draft)
        logger.info("Created employee %s (%s)", employee_id, draft.model.value)
        return employee_id

    def update_employee(self, employee_id: int, **fields) -> Employee:
        """Update the profile and record rate, salary and quota changes.

        Fields that are not passed keep their current value.
        """

        old = self.get_employee(employee_id)
        current = old.to_dict()
        current.pop("employee_id")
        draft = build_draft(**{**current, **fields})
        new = replace(
            old,
            full_name=draft.full_name,
            model=draft.model,
            hourly_rate=draft.hourly_rate,
            overtime_rate=draft.overtime_rate,
            fixed_monthly_salary=draft.fixed_monthly_salary,
            total_annual_leave_days=draft.total_annual_leave_days,
            email=draft.email,
            phone=draft.phone,
            bank_iban=draft.bank_iban,
        )

        if not self._employees.update(new):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        self._recorder.record_update(old, new)
        return new

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError(f"Employee {employee_id} does not exist")
        logger.info("Deleted employee %s", employee_id)
