from __future__ import annotations

import dataclasses
import uuid
from typing import Any, Generic, List, Optional, Type, TypeVar

from ..common.documents import from_document, to_document
from .document_store import DocumentCollection

T = TypeVar("T")


def new_id() -> str:
    return uuid.uuid4().hex


class DocumentRepository(Generic[T]):
    """CRUD over one collection, mapping documents to the ``model`` dataclass.

    Entity repositories subclass this and add their field-match finders on top
    of ``_find_by`` / ``_find_one_by``.
    """

    model: Type[T]

    def __init__(self, collection: DocumentCollection):
        self._collection = collection

    def _load(self, doc: dict) -> T:
        return from_document(self.model, doc)

    def _load_all(self, docs: List[dict]) -> List[T]:
        return [self._load(d) for d in docs]

    def find_all(self) -> List[T]:
        return self._load_all(self._collection.find_all())

    def find_by_id(self, record_id: str) -> Optional[T]:
        doc = self._collection.find_by_id(record_id)
        if doc is None:
            return None
        return self._load(doc)

    def save(self, record: T) -> T:
        """Insert or replace; a record without an id gets a fresh one."""
        if not getattr(record, "id", None):
            record = dataclasses.replace(record, id=new_id())
        self._collection.upsert(record.id, to_document(record))
        return record

    def delete_by_id(self, record_id: str) -> bool:
        return self._collection.delete(record_id)

    def exists_by_id(self, record_id: str) -> bool:
        return self._collection.exists(record_id)

    def _find_by(self, field: str, value: Any) -> List[T]:
        return self._load_all(self._collection.find_where(field, value))

    def _find_one_by(self, field: str, value: Any) -> Optional[T]:
        found = self._collection.find_where(field, value)
        return self._load(found[0]) if found else None

    def _exists_by(self, field: str, value: Any) -> bool:
        return bool(self._collection.find_where(field, value))

    def _find_between(self, field: str, low: Any, high: Any) -> List[T]:
        return self._load_all(self._collection.find_between(field, low, high))
