"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory backend client fixtures
- Reset of the shared client and cached settings between tests
"""

import os
import sys
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_KEY"] = "test-anon-key-for-unit-tests"
os.environ["SUPABASE_SCHEMA"] = "public"
os.environ["CLIENT_TIMEOUT"] = "5"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_JSON"] = "true"

# Add repository root and this directory to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))
sys.path.insert(0, str(Path(__file__).parent))

from recordstore.core import database  # noqa: E402
from recordstore.core.config import get_settings  # noqa: E402
from recordstore.repositories.record import RecordRepository  # noqa: E402
from fakes import FakeSupabaseClient  # noqa: E402


@pytest.fixture
def fake_client():
    """
    Provide an in-memory client with an empty "items" table.

    Returns:
        FakeSupabaseClient
    """
    return FakeSupabaseClient(tables={"items": []})


@pytest.fixture
def repo(fake_client):
    """Create RecordRepository over the in-memory client."""
    return RecordRepository(fake_client)


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Clear the shared client handle and cached settings after each test."""
    yield
    database._client = None
    get_settings.cache_clear()
