"""Pytest configuration for API tests."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create a test client for the FastAPI application."""
    from hilbert_geo.api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
