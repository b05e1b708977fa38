import pytest
from fastapi.testclient import TestClient

from employee_api.app.main import create_app
from employee_api.app.schemas.employee import EmployeeCreate
from employee_api.app.services.employee_service import EmployeeStore


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def seeded_store(store):
    """Store holding Bob (id 1), Sara (id 2) and Mike (id 3)."""
    for name, age in (("Bob", 30), ("Sara", 34), ("Mike", 36)):
        store.create(EmployeeCreate(name=name, age=age))
    return store
