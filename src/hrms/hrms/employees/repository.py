from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, never on a concrete store.
    """

    def find_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_by_department(self, department: str) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_status(self, status: str) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_manager(self, manager: str) -> Sequence[Employee]:
        raise NotImplementedError

    def exists_by_employee_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def exists_by_email(self, email: str) -> bool:
        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
