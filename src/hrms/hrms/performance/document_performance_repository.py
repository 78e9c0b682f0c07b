from __future__ import annotations

from ..database.document_repository import DocumentRepository
from .model import Performance
from .repository import PerformanceRepository


class DocumentPerformanceRepository(DocumentRepository[Performance], PerformanceRepository):
    model = Performance
