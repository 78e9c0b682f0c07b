from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Payroll


class PayrollRepository(Protocol):
    def find_all(self) -> Sequence[Payroll]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Payroll]:
        raise NotImplementedError

    def find_by_employee_id(self, employee_id: str) -> Sequence[Payroll]:
        raise NotImplementedError

    def find_by_status(self, status: str) -> Sequence[Payroll]:
        raise NotImplementedError

    def find_by_pay_period(self, start: date, end: date) -> Sequence[Payroll]:
        """Payrolls whose period starts on ``start`` and ends on ``end``."""

        raise NotImplementedError

    def find_by_pay_date_between(self, start: date, end: date) -> Sequence[Payroll]:
        """Payrolls with ``start <= pay_date <= end``."""

        raise NotImplementedError

    def save(self, payroll: Payroll) -> Payroll:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
