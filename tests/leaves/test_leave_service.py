from __future__ import annotations

from datetime import date

import pytest

from hrms.database.document_store import InMemoryDocumentCollection
from hrms.leaves.document_leave_repository import DocumentLeaveRepository
from hrms.leaves.model import Leave
from hrms.leaves.service import LeaveService


@pytest.fixture
def service(clock):
    return LeaveService(DocumentLeaveRepository(InMemoryDocumentCollection("leaves")), clock=clock)


def _leave(**kw) -> Leave:
    base = dict(employee_id="E1", leave_type="ANNUAL", start_date=date(2026, 3, 2), end_date=date(2026, 3, 4))
    base.update(kw)
    return Leave(**base)


def test_create_starts_pending(service):
    saved = service.create_leave(_leave(status=None))
    assert saved.status == "PENDING"
    assert saved.created_at is not None


def test_approve_sets_status_and_approver(service):
    leave = service.create_leave(_leave())

    result = service.approve(leave.id, "mgr1")

    assert result.found
    assert result.value.status == "APPROVED"
    assert result.value.approved_by == "mgr1"
    assert result.value.updated_at > leave.updated_at
    assert result.value.created_at == leave.created_at
    assert service.get_leave(leave.id).value.status == "APPROVED"


def test_reject_sets_status_rejecter_and_comments(service):
    leave = service.create_leave(_leave())

    result = service.reject(leave.id, "hr2", "Team is short-staffed")

    assert result.value.status == "REJECTED"
    assert result.value.approved_by == "hr2"
    assert result.value.comments == "Team is short-staffed"


def test_decisions_overwrite_each_other(service):
    leave = service.create_leave(_leave())
    service.reject(leave.id, "hr2", "no")
    again = service.approve(leave.id, "mgr1")
    assert again.value.status == "APPROVED"
    assert again.value.approved_by == "mgr1"
    # approve does not touch comments left by the rejection
    assert again.value.comments == "no"


def test_decisions_on_unknown_id_are_not_found(service):
    assert not service.approve("nope", "mgr1").found
    assert not service.reject("nope", "mgr1", "x").found
    assert service.list_leaves() == []


def test_filters(service):
    a = service.create_leave(_leave(employee_id="E1", leave_type="SICK"))
    b = service.create_leave(_leave(employee_id="E2"))
    service.approve(b.id, "mgr1")

    assert [x.id for x in service.list_by_employee("E1")] == [a.id]
    assert [x.id for x in service.list_by_status("PENDING")] == [a.id]
    assert [x.id for x in service.list_by_status("APPROVED")] == [b.id]
    assert [x.id for x in service.list_by_leave_type("SICK")] == [a.id]
    assert [x.id for x in service.list_by_approver("mgr1")] == [b.id]


def test_update_and_delete(service):
    leave = service.create_leave(_leave())
    updated = service.update_leave(leave.id, _leave(reason="family", status="PENDING"))
    assert updated.reason == "family"
    assert updated.created_at == leave.created_at

    service.delete_leave(leave.id)
    assert not service.get_leave(leave.id).found
