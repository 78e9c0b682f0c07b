"""Document collections: one self-contained record per entity, matched by field."""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, List, Optional, Protocol

Document = Dict[str, Any]

_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def check_name(name: str) -> str:
    """Reject collection/field names that are not plain identifiers."""
    if not _NAME_RE.match(name or ""):
        raise ValueError(f"Invalid collection or field name: {name!r}")
    return name


class DocumentCollection(Protocol):
    """Storage interface the entity repositories are written against.

    Lookups return documents in insertion order; ``upsert`` keeps an existing
    document's position.
    """

    name: str

    def find_all(self) -> List[Document]:
        raise NotImplementedError

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        raise NotImplementedError

    def find_where(self, field: str, value: Any) -> List[Document]:
        raise NotImplementedError

    def find_between(self, field: str, low: Any, high: Any) -> List[Document]:
        raise NotImplementedError

    def upsert(self, doc_id: str, doc: Document) -> None:
        raise NotImplementedError

    def delete(self, doc_id: str) -> bool:
        raise NotImplementedError

    def exists(self, doc_id: str) -> bool:
        raise NotImplementedError


class InMemoryDocumentCollection(DocumentCollection):
    """Process-local collection used by the ``memory`` backend and in tests."""

    def __init__(self, name: str):
        self.name = check_name(name)
        self._docs: Dict[str, Document] = {}

    def find_all(self) -> List[Document]:
        return [copy.deepcopy(d) for d in self._docs.values()]

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        doc = self._docs.get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    def find_where(self, field: str, value: Any) -> List[Document]:
        check_name(field)
        return [copy.deepcopy(d) for d in self._docs.values() if d.get(field) == value]

    def find_between(self, field: str, low: Any, high: Any) -> List[Document]:
        check_name(field)
        out: List[Document] = []
        for d in self._docs.values():
            v = d.get(field)
            if v is not None and low <= v <= high:
                out.append(copy.deepcopy(d))
        return out

    def upsert(self, doc_id: str, doc: Document) -> None:
        self._docs[doc_id] = copy.deepcopy(doc)

    def delete(self, doc_id: str) -> bool:
        return self._docs.pop(doc_id, None) is not None

    def exists(self, doc_id: str) -> bool:
        return doc_id in self._docs
