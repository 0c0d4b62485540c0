# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from main import create_app
from core.permission_service import PermissionService
from dependencies.auth import CurrentPrincipal
from models.enums import UserRole


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service() -> PermissionService:
    """Engine over the process-wide catalogs."""
    return PermissionService()


@pytest.fixture
def admin_principal():
    return CurrentPrincipal(role=UserRole.admin, user_id="admin-1")


@pytest.fixture
def building_manager_principal():
    return CurrentPrincipal(role=UserRole.gebaeudemanager, user_id="gm-1")


@pytest.fixture
def citizen_principal():
    return CurrentPrincipal(role=UserRole.buerger)


@pytest.fixture
def role_headers():
    """Build identity headers as the auth gateway would send them."""

    def build(role: str, user_id: str = None) -> dict:
        headers = {"X-User-Role": role}
        if user_id:
            headers["X-User-Id"] = user_id
        return headers

    return build
