from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a lookup: either a found value or nothing.

    Services return this for single-record lookups; callers branch on
    ``found`` before reading ``value``.
    """

    value: Optional[T] = None
    found: bool = False

    @classmethod
    def of(cls, value: T) -> "Lookup[T]":
        return cls(value=value, found=True)

    @classmethod
    def missing(cls) -> "Lookup[T]":
        return cls()

    @classmethod
    def from_optional(cls, value: Optional[T]) -> "Lookup[T]":
        return cls.missing() if value is None else cls.of(value)

    def __bool__(self) -> bool:
        return self.found
