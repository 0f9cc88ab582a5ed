"""Payroll Ledger package.

Attendance, leave and compensation tracking organized by feature modules
(employees, attendance, leave, bank, payments, payroll, history) with thin
Flask controllers over service/repository layers.
"""
