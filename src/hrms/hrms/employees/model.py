from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.documents import from_document, to_document
from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Employee record.

    ``employee_id`` is the business identifier (e.g. ``EMP0001``) and ``id`` the
    storage identifier. ``department`` and ``manager`` are loose string
    references.
    """

    id: Optional[str] = None
    employee_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    manager: Optional[str] = None
    employment_type: Optional[str] = None
    hire_date: Optional[date] = None
    base_salary: float = 0.0
    status: Optional[str] = EmployeeStatus.ACTIVE.value
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)
