from __future__ import annotations

from ..model import Payroll
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = salary + allowances + overtime + bonuses; net = gross - deductions."""

    def gross_pay(self, payroll: Payroll) -> float:
        return payroll.basic_salary + payroll.allowances + payroll.overtime + payroll.bonuses

    def total_deductions(self, payroll: Payroll) -> float:
        return (
            payroll.tax_deduction
            + payroll.health_insurance
            + payroll.retirement_fund
            + payroll.other_deductions
        )
