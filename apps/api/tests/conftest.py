"""Pytest configuration and fixtures."""

import os
import sys

import pytest

# Ensure 'apps/api/src' is on sys.path for absolute 'userapi.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from userapi.config import Settings  # noqa: E402
from userapi.main import create_app  # noqa: E402

TEST_TOKEN = "test-secret"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, environment="test", auth_token=TEST_TOKEN)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create an application with an empty store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the valid bearer token."""
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
