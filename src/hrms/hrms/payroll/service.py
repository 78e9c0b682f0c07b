from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.auditing import stamp_new, stamp_update
from ..common.datetime_utils import now_local
from ..core.enums import PayrollStatus
from ..core.exceptions import ValidationError
from ..core.result import Lookup
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payroll
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: payroll records.

    Gross pay, total deductions and net pay are always recomputed from the
    component fields before saving; values sent by the caller are discarded.
    """

    def __init__(
        self,
        payrolls: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._payrolls = payrolls
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock

    def list_payrolls(self) -> Sequence[Payroll]:
        return self._payrolls.find_all()

    def get_payroll(self, record_id: str) -> Lookup[Payroll]:
        return Lookup.from_optional(self._payrolls.find_by_id(record_id))

    def list_by_employee(self, employee_id: str) -> Sequence[Payroll]:
        return self._payrolls.find_by_employee_id(employee_id)

    def list_by_status(self, status: str) -> Sequence[Payroll]:
        return self._payrolls.find_by_status(status)

    def list_by_period(self, start: date, end: date) -> Sequence[Payroll]:
        return self._payrolls.find_by_pay_period(start, end)

    def list_by_pay_date_between(self, start: date, end: date) -> Sequence[Payroll]:
        if start > end:
            raise ValidationError("Start date must not be after end date")
        return self._payrolls.find_by_pay_date_between(start, end)

    def create_payroll(self, payroll: Payroll) -> Payroll:
        if not payroll.status:
            payroll = replace(payroll, status=PayrollStatus.DRAFT.value)
        payroll = self._calculator.apply(payroll)
        saved = self._payrolls.save(stamp_new(payroll, self._clock()))
        logger.info("Created payroll id=%s employee_id=%s net_pay=%.2f", saved.id, saved.employee_id, saved.net_pay)
        return saved

    def update_payroll(self, record_id: str, payroll: Payroll) -> Payroll:
        existing = self._payrolls.find_by_id(record_id)
        payroll = self._calculator.apply(payroll)
        saved = self._payrolls.save(stamp_update(payroll, record_id, existing, self._clock()))
        logger.info("Updated payroll id=%s net_pay=%.2f", record_id, saved.net_pay)
        return saved

    def delete_payroll(self, record_id: str) -> None:
        deleted = self._payrolls.delete_by_id(record_id)
        logger.info("Deleted payroll id=%s (existed=%s)", record_id, deleted)
