from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.auditing import stamp_new
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import PLACEHOLDER_TOKEN
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """What a successful login hands back to the caller."""

    user: User
    token: str


class AuthService:
    """Use case: login and registration.

    This is a stand-in, not a security mechanism: the token is a fixed
    placeholder and no session is kept.
    """

    def __init__(self, users: UserRepository, *, clock: Callable[[], datetime] = now_local):
        self._users = users
        self._clock = clock

    def exists_by_username(self, username: str) -> bool:
        return self._users.exists_by_username(username)

    def exists_by_email(self, email: str) -> bool:
        return self._users.exists_by_email(email)

    def authenticate(self, username: str, password: str) -> LoginResult:
        user = self._users.find_by_username(username or "")
        if not user or not user.password:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for username=%r", username)
            raise AuthenticationError("Invalid credentials")

        return LoginResult(user=user, token=PLACEHOLDER_TOKEN)

    def register(self, user: User) -> User:
        username = require_non_empty(user.username, "Username")
        password = require_non_empty(user.password, "Password")

        if self._users.exists_by_username(username):
            raise ValidationError("Username already exists")
        if user.email and self._users.exists_by_email(user.email):
            raise ValidationError("Email already exists")

        user = replace(
            user,
            id=None,
            username=username,
            password=generate_password_hash(password),
            role=user.role or Role.EMPLOYEE.value,
        )
        saved = self._users.save(stamp_new(user, self._clock()))
        logger.info("Registered user id=%s username=%r", saved.id, saved.username)
        return saved
