"""Explicit created/updated stamping done by the services before every save."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def stamp_new(record: T, now: datetime) -> T:
    return replace(record, created_at=now, updated_at=now)


def stamp_update(record: T, record_id: str, existing: Optional[Any], now: datetime) -> T:
    """Bind ``record`` to ``record_id`` and refresh ``updated_at``.

    ``created_at`` is carried over from the stored record; a record saved under
    a fresh id is stamped as new.
    """
    created_at = getattr(existing, "created_at", None) or now
    return replace(record, id=record_id, created_at=created_at, updated_at=now)
