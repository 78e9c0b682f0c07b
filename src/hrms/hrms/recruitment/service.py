from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence

from ..common.auditing import stamp_new, stamp_update
from ..common.datetime_utils import now_local
from ..core.enums import ApplicationStatus, JobStatus
from ..core.result import Lookup
from .model import Application, JobPosting
from .repository import ApplicationRepository, JobPostingRepository

logger = logging.getLogger(__name__)


class RecruitmentService:
    """Use case: job postings.

    Salary range, deadline and skills are stored as given.
    """

    def __init__(self, postings: JobPostingRepository, *, clock: Callable[[], datetime] = now_local):
        self._postings = postings
        self._clock = clock

    def list_job_postings(self) -> Sequence[JobPosting]:
        return self._postings.find_all()

    def get_job_posting(self, record_id: str) -> Lookup[JobPosting]:
        return Lookup.from_optional(self._postings.find_by_id(record_id))

    def list_by_status(self, status: str) -> Sequence[JobPosting]:
        return self._postings.find_by_status(status)

    def list_by_department(self, department: str) -> Sequence[JobPosting]:
        return self._postings.find_by_department(department)

    def list_by_employment_type(self, employment_type: str) -> Sequence[JobPosting]:
        return self._postings.find_by_employment_type(employment_type)

    def list_by_posted_by(self, posted_by: str) -> Sequence[JobPosting]:
        return self._postings.find_by_posted_by(posted_by)

    def create_job_posting(self, posting: JobPosting) -> JobPosting:
        if not posting.status:
            posting = replace(posting, status=JobStatus.ACTIVE.value)
        saved = self._postings.save(stamp_new(posting, self._clock()))
        logger.info("Created job posting id=%s title=%r", saved.id, saved.title)
        return saved

    def update_job_posting(self, record_id: str, posting: JobPosting) -> JobPosting:
        existing = self._postings.find_by_id(record_id)
        saved = self._postings.save(stamp_update(posting, record_id, existing, self._clock()))
        logger.info("Updated job posting id=%s", record_id)
        return saved

    def delete_job_posting(self, record_id: str) -> None:
        deleted = self._postings.delete_by_id(record_id)
        logger.info("Deleted job posting id=%s (existed=%s)", record_id, deleted)


class ApplicationService:
    """Use case: applications to job postings."""

    def __init__(self, applications: ApplicationRepository, *, clock: Callable[[], datetime] = now_local):
        self._applications = applications
        self._clock = clock

    def list_applications(self) -> Sequence[Application]:
        return self._applications.find_all()

    def get_application(self, record_id: str) -> Lookup[Application]:
        return Lookup.from_optional(self._applications.find_by_id(record_id))

    def list_by_job_posting(self, job_posting_id: str) -> Sequence[Application]:
        return self._applications.find_by_job_posting_id(job_posting_id)

    def list_by_status(self, status: str) -> Sequence[Application]:
        return self._applications.find_by_status(status)

    def create_application(self, application: Application) -> Application:
        if not application.status:
            application = replace(application, status=ApplicationStatus.SUBMITTED.value)
        saved = self._applications.save(stamp_new(application, self._clock()))
        logger.info("Created application id=%s job_posting_id=%s", saved.id, saved.job_posting_id)
        return saved

    def update_application(self, record_id: str, application: Application) -> Application:
        existing = self._applications.find_by_id(record_id)
        saved = self._applications.save(stamp_update(application, record_id, existing, self._clock()))
        logger.info("Updated application id=%s", record_id)
        return saved

    def delete_application(self, record_id: str) -> None:
        deleted = self._applications.delete_by_id(record_id)
        logger.info("Deleted application id=%s (existed=%s)", record_id, deleted)
