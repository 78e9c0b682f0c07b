from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Application, JobPosting


class JobPostingRepository(Protocol):
    def find_all(self) -> Sequence[JobPosting]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[JobPosting]:
        raise NotImplementedError

    def find_by_status(self, status: str) -> Sequence[JobPosting]:
        raise NotImplementedError

    def find_by_department(self, department: str) -> Sequence[JobPosting]:
        raise NotImplementedError

    def find_by_employment_type(self, employment_type: str) -> Sequence[JobPosting]:
        raise NotImplementedError

    def find_by_posted_by(self, posted_by: str) -> Sequence[JobPosting]:
        raise NotImplementedError

    def save(self, posting: JobPosting) -> JobPosting:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError


class ApplicationRepository(Protocol):
    def find_all(self) -> Sequence[Application]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Application]:
        raise NotImplementedError

    def find_by_job_posting_id(self, job_posting_id: str) -> Sequence[Application]:
        raise NotImplementedError

    def find_by_status(self, status: str) -> Sequence[Application]:
        raise NotImplementedError

    def save(self, application: Application) -> Application:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
