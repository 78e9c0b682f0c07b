from __future__ import annotations

from datetime import date

import pytest

from hrms.core.exceptions import ValidationError
from hrms.database.document_store import InMemoryDocumentCollection
from hrms.payroll.document_payroll_repository import DocumentPayrollRepository
from hrms.payroll.model import Payroll
from hrms.payroll.service import PayrollService


@pytest.fixture
def service(clock):
    repo = DocumentPayrollRepository(InMemoryDocumentCollection("payrolls"))
    return PayrollService(repo, clock=clock)


def _payroll(**kw) -> Payroll:
    base = dict(
        employee_id="E1",
        pay_period_start=date(2026, 1, 1),
        pay_period_end=date(2026, 1, 31),
        basic_salary=4000,
        allowances=400,
        overtime=100,
        bonuses=0,
        tax_deduction=500,
        health_insurance=100,
        retirement_fund=200,
        other_deductions=50,
    )
    base.update(kw)
    return Payroll(**base)


def test_create_discards_caller_totals_and_defaults_to_draft(service):
    saved = service.create_payroll(_payroll(gross_pay=99999, total_deductions=0, net_pay=99999, status=None))

    assert saved.id
    assert saved.gross_pay == 4500
    assert saved.total_deductions == 850
    assert saved.net_pay == 3650
    assert saved.status == "DRAFT"
    assert saved.created_at == saved.updated_at

    stored = service.get_payroll(saved.id)
    assert stored.found and stored.value.net_pay == 3650


def test_update_recomputes_and_keeps_created_at(service):
    created = service.create_payroll(_payroll())

    updated = service.update_payroll(created.id, _payroll(bonuses=1000, net_pay=0, status="PROCESSED"))

    assert updated.id == created.id
    assert updated.gross_pay == 5500
    assert updated.net_pay == 5500 - 850
    assert updated.status == "PROCESSED"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_of_unknown_id_creates_record_under_that_id(service):
    saved = service.update_payroll("fixed-id", _payroll())
    assert saved.id == "fixed-id"
    assert saved.created_at is not None
    assert service.get_payroll("fixed-id").found


def test_filters(service):
    a = service.create_payroll(_payroll(employee_id="E1", status="PAID", pay_date=date(2026, 2, 5)))
    b = service.create_payroll(_payroll(employee_id="E2", status="DRAFT", pay_date=date(2026, 3, 5)))
    c = service.create_payroll(
        _payroll(employee_id="E1", status="PAID", pay_period_start=date(2026, 2, 1), pay_period_end=date(2026, 2, 28))
    )

    assert [p.id for p in service.list_by_employee("E1")] == [a.id, c.id]
    assert [p.id for p in service.list_by_status("PAID")] == [a.id, c.id]
    assert service.list_by_status("PROCESSED") == []
    assert [p.id for p in service.list_by_period(date(2026, 1, 1), date(2026, 1, 31))] == [a.id, b.id]
    assert [p.id for p in service.list_by_pay_date_between(date(2026, 2, 1), date(2026, 2, 28))] == [a.id]


def test_pay_date_range_includes_both_bounds(service):
    first = service.create_payroll(_payroll(pay_date=date(2026, 2, 1)))
    last = service.create_payroll(_payroll(pay_date=date(2026, 2, 28)))
    service.create_payroll(_payroll(pay_date=date(2026, 3, 1)))

    hits = service.list_by_pay_date_between(date(2026, 2, 1), date(2026, 2, 28))
    assert [p.id for p in hits] == [first.id, last.id]


def test_pay_date_range_must_be_ordered(service):
    with pytest.raises(ValidationError):
        service.list_by_pay_date_between(date(2026, 3, 1), date(2026, 1, 1))


def test_delete_then_get_is_not_found(service):
    saved = service.create_payroll(_payroll())
    service.delete_payroll(saved.id)
    assert not service.get_payroll(saved.id).found
    service.delete_payroll(saved.id)
