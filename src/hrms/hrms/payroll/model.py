from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.documents import from_document, to_document
from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class Payroll:
    """Pay slip for one employee and one pay period.

    ``gross_pay``, ``total_deductions`` and ``net_pay`` are derived and are
    recomputed by PayrollService on every save.
    """

    id: Optional[str] = None
    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None

    basic_salary: float = 0.0
    allowances: float = 0.0
    overtime: float = 0.0
    bonuses: float = 0.0
    gross_pay: float = 0.0

    tax_deduction: float = 0.0
    health_insurance: float = 0.0
    retirement_fund: float = 0.0
    other_deductions: float = 0.0
    total_deductions: float = 0.0

    net_pay: float = 0.0
    status: Optional[str] = PayrollStatus.DRAFT.value
    pay_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Payroll":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)
