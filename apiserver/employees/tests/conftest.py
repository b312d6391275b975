"""
Shared fixtures for the employee API tests.
"""
import pytest
from django.core.cache import caches
from rest_framework.test import APIClient

from employees.models import Employee
from employees.repositories import EmployeeRepository


@pytest.fixture(autouse=True)
def clear_response_cache():
    """Cached GET responses must not leak between tests."""
    caches['responses'].clear()
    yield
    caches['responses'].clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def repository():
    return EmployeeRepository()


@pytest.fixture
def alice_payload():
    return {
        "firstname": "Alice",
        "lastname": "Smith",
        "salary": 50000,
        "role": "Engineer",
        "age": 30,
    }


@pytest.fixture
def make_employee(db):
    """Insert an employee row directly through the ORM."""
    def _make(**overrides):
        fields = {
            "firstname": "bob",
            "lastname": "jones",
            "salary": 42000,
            "role": "designer",
            "age": 41,
        }
        fields.update(overrides)
        return Employee.all_objects.create(**fields)
    return _make
