from __future__ import annotations

import pytest

from hrms.database.document_store import InMemoryDocumentCollection
from hrms.employees.document_employee_repository import DocumentEmployeeRepository
from hrms.employees.model import Employee
from hrms.employees.service import EmployeeService


@pytest.fixture
def service(clock):
    return EmployeeService(DocumentEmployeeRepository(InMemoryDocumentCollection("employees")), clock=clock)


def test_create_stamps_and_defaults_status(service):
    saved = service.create_employee(Employee(employee_id="EMP0001", email="a@x.io", status=None))
    assert saved.status == "ACTIVE"
    assert saved.created_at == saved.updated_at


def test_lookups_by_business_keys(service):
    saved = service.create_employee(Employee(employee_id="EMP0001", email="a@x.io", department="IT", manager="EMP0009"))

    assert service.get_employee(saved.id).value == saved
    assert service.get_by_employee_id("EMP0001").value.id == saved.id
    assert service.get_by_email("a@x.io").value.id == saved.id
    assert not service.get_by_employee_id("EMP9999").found
    assert service.exists_by_employee_id("EMP0001")
    assert not service.exists_by_employee_id("EMP9999")
    assert service.exists_by_email("a@x.io")
    assert [e.id for e in service.list_by_department("IT")] == [saved.id]
    assert [e.id for e in service.list_by_manager("EMP0009")] == [saved.id]
    assert [e.id for e in service.list_by_status("ACTIVE")] == [saved.id]


def test_service_does_not_reject_duplicates(service):
    service.create_employee(Employee(employee_id="EMP0001"))
    service.create_employee(Employee(employee_id="EMP0001"))
    assert len(service.list_employees()) == 2


def test_update_preserves_created_at(service):
    created = service.create_employee(Employee(employee_id="EMP0001", position="Dev"))
    updated = service.update_employee(created.id, Employee(employee_id="EMP0001", position="Lead"))
    assert updated.position == "Lead"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_delete(service):
    saved = service.create_employee(Employee(employee_id="EMP0001"))
    service.delete_employee(saved.id)
    assert not service.get_employee(saved.id).found
