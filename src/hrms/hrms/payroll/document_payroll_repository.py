from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.document_repository import DocumentRepository
from .model import Payroll
from .repository import PayrollRepository


class DocumentPayrollRepository(DocumentRepository[Payroll], PayrollRepository):
    model = Payroll

    def find_by_employee_id(self, employee_id: str) -> Sequence[Payroll]:
        return self._find_by("employeeId", employee_id)

    def find_by_status(self, status: str) -> Sequence[Payroll]:
        return self._find_by("status", status)

    def find_by_pay_period(self, start: date, end: date) -> Sequence[Payroll]:
        same_start = self._find_by("payPeriodStart", start.isoformat())
        return [p for p in same_start if p.pay_period_end == end]

    def find_by_pay_date_between(self, start: date, end: date) -> Sequence[Payroll]:
        return self._find_between("payDate", start.isoformat(), end.isoformat())
