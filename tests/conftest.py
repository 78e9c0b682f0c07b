from __future__ import annotations

import os
from datetime import datetime, timedelta

import pytest

os.environ.setdefault("APP_ENV", "testing")

from hrms.container import BACKEND_MEMORY, build_container  # noqa: E402
from hrms.main import create_app  # noqa: E402


class FakeClock:
    """Deterministic clock: each call returns the next minute."""

    def __init__(self, start: datetime = datetime(2026, 2, 1, 9, 0, 0)):
        self._now = start

    def __call__(self) -> datetime:
        now = self._now
        self._now = now + timedelta(minutes=1)
        return now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def container():
    return build_container(backend=BACKEND_MEMORY)


@pytest.fixture
def app(container):
    app = create_app(container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
