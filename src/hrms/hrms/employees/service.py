from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence

from ..common.auditing import stamp_new, stamp_update
from ..common.datetime_utils import now_local
from ..core.enums import EmployeeStatus
from ..core.result import Lookup
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records.

    No duplicate check happens here; registration flows use
    ``exists_by_employee_id`` / ``exists_by_email`` first.
    """

    def __init__(self, employees: EmployeeRepository, *, clock: Callable[[], datetime] = now_local):
        self._employees = employees
        self._clock = clock

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.find_all()

    def get_employee(self, record_id: str) -> Lookup[Employee]:
        return Lookup.from_optional(self._employees.find_by_id(record_id))

    def get_by_employee_id(self, employee_id: str) -> Lookup[Employee]:
        return Lookup.from_optional(self._employees.find_by_employee_id(employee_id))

    def get_by_email(self, email: str) -> Lookup[Employee]:
        return Lookup.from_optional(self._employees.find_by_email(email))

    def list_by_department(self, department: str) -> Sequence[Employee]:
        return self._employees.find_by_department(department)

    def list_by_status(self, status: str) -> Sequence[Employee]:
        return self._employees.find_by_status(status)

    def list_by_manager(self, manager: str) -> Sequence[Employee]:
        return self._employees.find_by_manager(manager)

    def create_employee(self, employee: Employee) -> Employee:
        if not employee.status:
            employee = replace(employee, status=EmployeeStatus.ACTIVE.value)
        saved = self._employees.save(stamp_new(employee, self._clock()))
        logger.info("Created employee id=%s employee_id=%s", saved.id, saved.employee_id)
        return saved

    def update_employee(self, record_id: str, employee: Employee) -> Employee:
        existing = self._employees.find_by_id(record_id)
        saved = self._employees.save(stamp_update(employee, record_id, existing, self._clock()))
        logger.info("Updated employee id=%s", record_id)
        return saved

    def delete_employee(self, record_id: str) -> None:
        deleted = self._employees.delete_by_id(record_id)
        logger.info("Deleted employee id=%s (existed=%s)", record_id, deleted)

    def exists_by_employee_id(self, employee_id: str) -> bool:
        return self._employees.exists_by_employee_id(employee_id)

    def exists_by_email(self, email: str) -> bool:
        return self._employees.exists_by_email(email)
