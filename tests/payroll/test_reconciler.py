from payroll_ledger.payments.model import PaymentTotals
from payroll_ledger.payroll.reconciler import reconcile


def test_remaining_balances_are_salary_and_bank_target_minus_payments():
    balances = reconcile(total_monthly_salary=1000, bank_target=800, payments=PaymentTotals(cash=150, bank=200))
    assert balances.remaining_salary_balance == 650
    assert balances.remaining_bank_balance == 600


def test_overpayment_is_negative_not_clamped():
    balances = reconcile(total_monthly_salary=100, bank_target=0, payments=PaymentTotals(cash=80, bank=50))
    assert balances.remaining_salary_balance == -30
    assert balances.remaining_bank_balance == -50
