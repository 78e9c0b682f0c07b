from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.documents import from_document, to_document
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account.

    ``password`` holds a werkzeug hash once stored and is never serialized
    into responses.
    """

    id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = Role.EMPLOYEE.value
    employee_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self, exclude=("password",))
