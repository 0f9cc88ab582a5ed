from __future__ import annotations

from dataclasses import dataclass

from .attendance.aggregator import AttendanceAggregator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .bank.mysql_bank_salary_repository import MySQLBankSalaryRepository
from .bank.repository import BankSalaryRepository
from .bank.service import BankSalaryService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .history.mysql_history_repository import MySQLChangeHistoryRepository
from .history.recorder import ChangeHistoryRecorder
from .history.repository import ChangeHistoryRepository
from .leave.ledger import LeaveLedger
from .leave.mysql_leave_repository import MySQLLeaveUsageRepository
from .leave.repository import LeaveUsageRepository
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leave_repo: LeaveUsageRepository
    bank_repo: BankSalaryRepository
    payments_repo: PaymentRepository
    history_repo: ChangeHistoryRepository

    history_recorder: ChangeHistoryRecorder
    employee_service: EmployeeService
    leave_ledger: LeaveLedger
    attendance_service: AttendanceService
    attendance_aggregator: AttendanceAggregator
    bank_service: BankSalaryService
    payment_service: PaymentService
    payroll_service: PayrollService


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    leave_repo: LeaveUsageRepository,
    bank_repo: BankSalaryRepository,
    payments_repo: PaymentRepository,
    history_repo: ChangeHistoryRepository,
) -> Container:
    """Build every service on top of the given record store."""

    history_recorder = ChangeHistoryRecorder(history_repo)
    employee_service = EmployeeService(employees_repo, history_recorder)
    leave_ledger = LeaveLedger(attendance_repo, leave_repo, employees_repo)
    attendance_service = AttendanceService(attendance_repo, leave_ledger)
    attendance_aggregator = AttendanceAggregator(attendance_repo)
    bank_service = BankSalaryService(bank_repo, employees_repo)
    payment_service = PaymentService(payments_repo, employees_repo)
    payroll_service = PayrollService(employees_repo, attendance_aggregator, bank_service, payment_service)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        bank_repo=bank_repo,
        payments_repo=payments_repo,
        history_repo=history_repo,
        history_recorder=history_recorder,
        employee_service=employee_service,
        leave_ledger=leave_ledger,
        attendance_service=attendance_service,
        attendance_aggregator=attendance_aggregator,
        bank_service=bank_service,
        payment_service=payment_service,
        payroll_service=payroll_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leave_repo=MySQLLeaveUsageRepository(conn),
        bank_repo=MySQLBankSalaryRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        history_repo=MySQLChangeHistoryRepository(conn),
    )
