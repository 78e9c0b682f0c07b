from __future__ import annotations

from typing import Optional, Sequence

from ..database.document_repository import DocumentRepository
from .model import Employee
from .repository import EmployeeRepository


class DocumentEmployeeRepository(DocumentRepository[Employee], EmployeeRepository):
    model = Employee

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._find_one_by("employeeId", employee_id)

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self._find_one_by("email", email)

    def find_by_department(self, department: str) -> Sequence[Employee]:
        return self._find_by("department", department)

    def find_by_status(self, status: str) -> Sequence[Employee]:
        return self._find_by("status", status)

    def find_by_manager(self, manager: str) -> Sequence[Employee]:
        return self._find_by("manager", manager)

    def exists_by_employee_id(self, employee_id: str) -> bool:
        return self._exists_by("employeeId", employee_id)

    def exists_by_email(self, email: str) -> bool:
        return self._exists_by("email", email)
