from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.auditing import stamp_new, stamp_update
from ..common.datetime_utils import now_local
from ..core.enums import LeaveStatus
from ..core.result import Lookup
from .model import Leave
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: leave requests and their approve/reject decisions.

    Decisions are not guarded by the current status: approving or rejecting
    an already decided leave overwrites the previous decision.
    """

    def __init__(self, leaves: LeaveRepository, *, clock: Callable[[], datetime] = now_local):
        self._leaves = leaves
        self._clock = clock

    def list_leaves(self) -> Sequence[Leave]:
        return self._leaves.find_all()

    def get_leave(self, record_id: str) -> Lookup[Leave]:
        return Lookup.from_optional(self._leaves.find_by_id(record_id))

    def list_by_employee(self, employee_id: str) -> Sequence[Leave]:
        return self._leaves.find_by_employee_id(employee_id)

    def list_by_status(self, status: str) -> Sequence[Leave]:
        return self._leaves.find_by_status(status)

    def list_by_leave_type(self, leave_type: str) -> Sequence[Leave]:
        return self._leaves.find_by_leave_type(leave_type)

    def list_by_approver(self, approved_by: str) -> Sequence[Leave]:
        return self._leaves.find_by_approved_by(approved_by)

    def create_leave(self, leave: Leave) -> Leave:
        if not leave.status:
            leave = replace(leave, status=LeaveStatus.PENDING.value)
        saved = self._leaves.save(stamp_new(leave, self._clock()))
        logger.info("Created leave id=%s employee_id=%s", saved.id, saved.employee_id)
        return saved

    def update_leave(self, record_id: str, leave: Leave) -> Leave:
        existing = self._leaves.find_by_id(record_id)
        saved = self._leaves.save(stamp_update(leave, record_id, existing, self._clock()))
        logger.info("Updated leave id=%s", record_id)
        return saved

    def delete_leave(self, record_id: str) -> None:
        deleted = self._leaves.delete_by_id(record_id)
        logger.info("Deleted leave id=%s (existed=%s)", record_id, deleted)

    def _decide(
        self,
        record_id: str,
        *,
        status: LeaveStatus,
        decided_by: Optional[str],
        comments: Optional[str] = None,
        set_comments: bool = False,
    ) -> Lookup[Leave]:
        leave = self._leaves.find_by_id(record_id)
        if not leave:
            return Lookup.missing()

        changes = {"status": status.value, "approved_by": decided_by, "updated_at": self._clock()}
        if set_comments:
            changes["comments"] = comments
        saved = self._leaves.save(replace(leave, **changes))
        logger.info("Leave id=%s -> %s by %s", record_id, status.value, decided_by)
        return Lookup.of(saved)

    def approve(self, record_id: str, approved_by: Optional[str]) -> Lookup[Leave]:
        return self._decide(record_id, status=LeaveStatus.APPROVED, decided_by=approved_by)

    def reject(self, record_id: str, rejected_by: Optional[str], comments: Optional[str]) -> Lookup[Leave]:
        return self._decide(
            record_id,
            status=LeaveStatus.REJECTED,
            decided_by=rejected_by,
            comments=comments,
            set_comments=True,
        )
