"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from heidelberg.core import container
from heidelberg.main import app


@pytest.fixture
def reset_container() -> Generator[None, None, None]:
    """Fresh session repository and use case for each test."""
    container.reader_session_repository.reset()
    container.reader_session_use_case.reset()
    yield
    container.reader_session_repository.reset()
    container.reader_session_use_case.reset()


@pytest.fixture
def client(reset_container: None) -> Generator[TestClient, Any, None]:
    """Create a test client that does not follow redirects."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
