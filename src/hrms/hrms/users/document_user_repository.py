from __future__ import annotations

from typing import Optional

from ..database.document_repository import DocumentRepository
from .model import User
from .repository import UserRepository


class DocumentUserRepository(DocumentRepository[User], UserRepository):
    model = User

    def find_by_username(self, username: str) -> Optional[User]:
        return self._find_one_by("username", username)

    def find_by_email(self, email: str) -> Optional[User]:
        return self._find_one_by("email", email)

    def exists_by_username(self, username: str) -> bool:
        return self._exists_by("username", username)

    def exists_by_email(self, email: str) -> bool:
        return self._exists_by("email", email)
