from __future__ import annotations

import pytest

from hrms.core.constants import PLACEHOLDER_TOKEN
from hrms.core.exceptions import AuthenticationError, ValidationError
from hrms.database.document_store import InMemoryDocumentCollection
from hrms.users.document_user_repository import DocumentUserRepository
from hrms.users.model import User
from hrms.users.service import AuthService


@pytest.fixture
def users():
    return DocumentUserRepository(InMemoryDocumentCollection("users"))


@pytest.fixture
def auth(users, clock):
    return AuthService(users, clock=clock)


def test_register_hashes_password_and_defaults_role(auth, users):
    saved = auth.register(User(username="alice", email="alice@x.io", password="s3cret!"))

    assert saved.id
    assert saved.role == "EMPLOYEE"
    assert saved.password != "s3cret!"
    assert users.find_by_username("alice").password == saved.password


def test_register_rejects_duplicate_username_then_email(auth, users):
    auth.register(User(username="alice", email="alice@x.io", password="pw"))

    with pytest.raises(ValidationError, match="Username already exists"):
        auth.register(User(username="alice", email="other@x.io", password="pw"))
    with pytest.raises(ValidationError, match="Email already exists"):
        auth.register(User(username="bob", email="alice@x.io", password="pw"))

    assert len(users.find_all()) == 1


def test_register_without_email_skips_email_uniqueness(auth, users):
    auth.register(User(username="alice", password="pw"))
    auth.register(User(username="bob", password="pw"))

    assert [u.username for u in users.find_all()] == ["alice", "bob"]


def test_register_requires_username_and_password(auth):
    with pytest.raises(ValidationError):
        auth.register(User(username="  ", password="pw"))
    with pytest.raises(ValidationError):
        auth.register(User(username="carol", password=""))


def test_login_returns_placeholder_token(auth):
    auth.register(User(username="alice", email="alice@x.io", password="pw"))

    result = auth.authenticate("alice", "pw")

    assert result.user.username == "alice"
    assert result.token == PLACEHOLDER_TOKEN


def test_login_rejects_bad_credentials(auth, users):
    auth.register(User(username="alice", password="pw"))
    users.save(User(username="legacy", password="CHANGE_ME"))

    with pytest.raises(AuthenticationError):
        auth.authenticate("alice", "wrong")
    with pytest.raises(AuthenticationError):
        auth.authenticate("nobody", "pw")
    with pytest.raises(AuthenticationError):
        auth.authenticate("legacy", "CHANGE_ME")
