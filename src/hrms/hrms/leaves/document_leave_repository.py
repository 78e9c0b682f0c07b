from __future__ import annotations

from typing import Sequence

from ..database.document_repository import DocumentRepository
from .model import Leave
from .repository import LeaveRepository


class DocumentLeaveRepository(DocumentRepository[Leave], LeaveRepository):
    model = Leave

    def find_by_employee_id(self, employee_id: str) -> Sequence[Leave]:
        return self._find_by("employeeId", employee_id)

    def find_by_status(self, status: str) -> Sequence[Leave]:
        return self._find_by("status", status)

    def find_by_leave_type(self, leave_type: str) -> Sequence[Leave]:
        return self._find_by("leaveType", leave_type)

    def find_by_approved_by(self, approved_by: str) -> Sequence[Leave]:
        return self._find_by("approvedBy", approved_by)
