from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.documents import from_document, to_document
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class Leave:
    """Leave request.

    ``approved_by`` holds whoever decided the request, approver or rejecter.
    """

    id: Optional[str] = None
    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    leave_type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = None
    status: Optional[str] = LeaveStatus.PENDING.value
    approved_by: Optional[str] = None
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Leave":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)
