from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Performance


class PerformanceRepository(Protocol):
    def find_all(self) -> Sequence[Performance]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[Performance]:
        raise NotImplementedError

    def save(self, performance: Performance) -> Performance:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError

    def exists_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
