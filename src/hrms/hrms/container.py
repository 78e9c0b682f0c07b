from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .database.document_store import DocumentCollection, InMemoryDocumentCollection
from .database.mysql_document_store import MySQLDocumentCollection
from .employees.document_employee_repository import DocumentEmployeeRepository
from .employees.service import EmployeeService
from .leaves.document_leave_repository import DocumentLeaveRepository
from .leaves.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.document_payroll_repository import DocumentPayrollRepository
from .payroll.service import PayrollService
from .performance.document_performance_repository import DocumentPerformanceRepository
from .performance.service import PerformanceService
from .recruitment.document_recruitment_repository import (
    DocumentApplicationRepository,
    DocumentJobPostingRepository,
)
from .recruitment.service import ApplicationService, RecruitmentService
from .users.document_user_repository import DocumentUserRepository
from .users.service import AuthService

BACKEND_MYSQL = "mysql"
BACKEND_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: DocumentEmployeeRepository
    leaves_repo: DocumentLeaveRepository
    payrolls_repo: DocumentPayrollRepository
    job_postings_repo: DocumentJobPostingRepository
    applications_repo: DocumentApplicationRepository
    performances_repo: DocumentPerformanceRepository
    users_repo: DocumentUserRepository

    employee_service: EmployeeService
    leave_service: LeaveService
    payroll_service: PayrollService
    recruitment_service: RecruitmentService
    application_service: ApplicationService
    performance_service: PerformanceService
    auth_service: AuthService


def _wire(conn: Optional[DatabaseConnection], collection: Callable[[str], DocumentCollection]) -> Container:
    employees_repo = DocumentEmployeeRepository(collection(constants.EMPLOYEES_COLLECTION))
    leaves_repo = DocumentLeaveRepository(collection(constants.LEAVES_COLLECTION))
    payrolls_repo = DocumentPayrollRepository(collection(constants.PAYROLLS_COLLECTION))
    job_postings_repo = DocumentJobPostingRepository(collection(constants.JOB_POSTINGS_COLLECTION))
    applications_repo = DocumentApplicationRepository(collection(constants.APPLICATIONS_COLLECTION))
    performances_repo = DocumentPerformanceRepository(collection(constants.PERFORMANCES_COLLECTION))
    users_repo = DocumentUserRepository(collection(constants.USERS_COLLECTION))

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        payrolls_repo=payrolls_repo,
        job_postings_repo=job_postings_repo,
        applications_repo=applications_repo,
        performances_repo=performances_repo,
        users_repo=users_repo,
        employee_service=EmployeeService(employees_repo),
        leave_service=LeaveService(leaves_repo),
        payroll_service=PayrollService(payrolls_repo, calculator=StandardPayrollCalculator()),
        recruitment_service=RecruitmentService(job_postings_repo),
        application_service=ApplicationService(applications_repo),
        performance_service=PerformanceService(performances_repo),
        auth_service=AuthService(users_repo),
    )


def build_container(*, db_config: Optional[dict] = None, backend: str = BACKEND_MYSQL) -> Container:
    if backend == BACKEND_MEMORY:
        return _wire(None, InMemoryDocumentCollection)

    if backend != BACKEND_MYSQL:
        raise ValueError(f"Unknown DB backend: {backend!r}")
    if db_config is None:
        raise ValueError("db_config is required for the mysql backend")

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(conn, lambda name: MySQLDocumentCollection(conn, name))
