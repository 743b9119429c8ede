"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- test_client: FastAPI TestClient for API integration tests
- holidays_2024: Resolved Colombian holidays of 2024
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep log files out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="festivos-logs-"))

# ruff: noqa: E402
from fastapi.testclient import TestClient

from festivos.core.holidays import get_holidays_for_year
from festivos.main import app


@pytest.fixture(scope="function")
def test_client():
    """
    FastAPI TestClient running the app lifespan.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def holidays_2024():
    """Resolved holidays of 2024 (Easter Sunday: March 31)."""
    return get_holidays_for_year(2024)
