from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Leave


class LeaveRepository(Protocol):
    def find_all(self) -> Sequence[Leave]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Leave]:
        raise NotImplementedError

    def find_by_employee_id(self, employee_id: str) -> Sequence[Leave]:
        raise NotImplementedError

    def find_by_status(self, status: str) -> Sequence[Leave]:
        raise NotImplementedError

    def find_by_leave_type(self, leave_type: str) -> Sequence[Leave]:
        raise NotImplementedError

    def find_by_approved_by(self, approved_by: str) -> Sequence[Leave]:
        raise NotImplementedError

    def save(self, leave: Leave) -> Leave:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
