from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the auth service depends on this interface, not on a concrete store.
    """

    def find_all(self) -> Sequence[User]:
        raise NotImplementedError

    def find_by_id(self, record_id: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def exists_by_username(self, username: str) -> bool:
        raise NotImplementedError

    def exists_by_email(self, email: str) -> bool:
        raise NotImplementedError

    def save(self, user: User) -> User:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
