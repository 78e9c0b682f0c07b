from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.documents import from_document, to_document
from ..core.enums import ApplicationStatus, JobStatus


@dataclass(frozen=True)
class JobPosting:
    id: Optional[str] = None
    title: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    employment_type: Optional[str] = None  # FULL_TIME, PART_TIME, CONTRACT
    description: Optional[str] = None
    requirements: Optional[str] = None
    skills: list[str] = field(default_factory=list)
    experience_level: Optional[str] = None  # ENTRY, JUNIOR, SENIOR, LEAD, MANAGER
    salary_min: float = 0.0
    salary_max: float = 0.0
    benefits: Optional[str] = None
    status: Optional[str] = JobStatus.ACTIVE.value
    application_deadline: Optional[date] = None
    posted_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)


@dataclass(frozen=True)
class Application:
    """A candidate's application to a job posting."""

    id: Optional[str] = None
    job_posting_id: Optional[str] = None
    applicant_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    status: Optional[str] = ApplicationStatus.SUBMITTED.value
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Application":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)
