from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.documents import from_document, to_document


@dataclass(frozen=True)
class Performance:
    """Performance review. No timestamps, no status."""

    id: Optional[str] = None
    employee_id: Optional[str] = None
    review_period: Optional[str] = None
    performance_rating: Optional[str] = None
    comments: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Performance":
        return from_document(cls, data)

    def to_dict(self) -> dict:
        return to_document(self)
