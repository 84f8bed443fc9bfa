"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; configure them before importing the app
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from tests.helpers.auth import ADMIN_ID, STUDENT_ID, TEST_JWT_SECRET, bearer  # noqa: E402

os.environ["AUTH_JWT_SECRET"] = TEST_JWT_SECRET

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from examprep.core.dependencies import get_question_repository  # noqa: E402
from examprep.main import app  # noqa: E402
from examprep.models import UserRole  # noqa: E402
from tests.helpers.fakes import FakeQuestionRepository  # noqa: E402


@pytest.fixture
def repo() -> FakeQuestionRepository:
    """In-memory repository with one student and one admin profile."""
    fake = FakeQuestionRepository()
    fake.roles[STUDENT_ID] = UserRole.STUDENT.value
    fake.roles[ADMIN_ID] = UserRole.ADMIN.value
    return fake


@pytest.fixture
def client(repo) -> Generator[TestClient, None, None]:
    """Test client with the repository dependency overridden."""
    app.dependency_overrides[get_question_repository] = lambda: repo
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers_student() -> dict[str, str]:
    return bearer(STUDENT_ID)


@pytest.fixture
def auth_headers_admin() -> dict[str, str]:
    return bearer(ADMIN_ID)
