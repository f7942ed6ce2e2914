# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a tmp_path-backed SequenceStore and a TestClient using it
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPPORT_CONTACT", "mail@domain.com")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_sequence_store
from app.main import app
from core.services.sequence_store import SequenceStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store(tmp_path):
    """SequenceStore writing into a per-test directory."""
    return SequenceStore(base_dir=tmp_path, filename="fibonacci.txt")


@pytest.fixture
def client(store):
    """TestClient whose routes use the per-test store."""
    app.dependency_overrides[get_sequence_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(store):
    """TestClient that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_sequence_store] = lambda: store
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
