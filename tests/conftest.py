"""Shared fixtures: a fresh store and app per test."""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.main import create_app
from employee_api.app.services.employee_service import EmployeeService
from employee_api.app.services.store import EmployeeStore


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def service(store):
    return EmployeeService(store)


@pytest.fixture
def app(store):
    return create_app(settings=Settings(log_level="WARNING"), store=store)


@pytest.fixture
def client(app):
    """Test client that returns 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def sample_employee():
    return {"name": "John Doe", "age": 30}
