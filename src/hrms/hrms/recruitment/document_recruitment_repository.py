from __future__ import annotations

from typing import Sequence

from ..database.document_repository import DocumentRepository
from .model import Application, JobPosting
from .repository import ApplicationRepository, JobPostingRepository


class DocumentJobPostingRepository(DocumentRepository[JobPosting], JobPostingRepository):
    model = JobPosting

    def find_by_status(self, status: str) -> Sequence[JobPosting]:
        return self._find_by("status", status)

    def find_by_department(self, department: str) -> Sequence[JobPosting]:
        return self._find_by("department", department)

    def find_by_employment_type(self, employment_type: str) -> Sequence[JobPosting]:
        return self._find_by("employmentType", employment_type)

    def find_by_posted_by(self, posted_by: str) -> Sequence[JobPosting]:
        return self._find_by("postedBy", posted_by)


class DocumentApplicationRepository(DocumentRepository[Application], ApplicationRepository):
    model = Application

    def find_by_job_posting_id(self, job_posting_id: str) -> Sequence[Application]:
        return self._find_by("jobPostingId", job_posting_id)

    def find_by_status(self, status: str) -> Sequence[Application]:
        return self._find_by("status", status)
