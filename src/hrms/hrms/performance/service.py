from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..core.result import Lookup
from .model import Performance
from .repository import PerformanceRepository

logger = logging.getLogger(__name__)


class PerformanceService:
    def __init__(self, performances: PerformanceRepository):
        self._performances = performances

    def list_performances(self) -> Sequence[Performance]:
        return self._performances.find_all()

    def get_performance(self, record_id: str) -> Lookup[Performance]:
        return Lookup.from_optional(self._performances.find_by_id(record_id))

    def create_performance(self, performance: Performance) -> Performance:
        saved = self._performances.save(performance)
        logger.info("Created performance review id=%s employee_id=%s", saved.id, saved.employee_id)
        return saved

    def update_performance(self, record_id: str, performance: Performance) -> Lookup[Performance]:
        # Unlike the other entities, a missing review is not created on update.
        if not self._performances.exists_by_id(record_id):
            return Lookup.missing()
        saved = self._performances.save(replace(performance, id=record_id))
        logger.info("Updated performance review id=%s", record_id)
        return Lookup.of(saved)

    def delete_performance(self, record_id: str) -> None:
        deleted = self._performances.delete_by_id(record_id)
        logger.info("Deleted performance review id=%s (existed=%s)", record_id, deleted)
