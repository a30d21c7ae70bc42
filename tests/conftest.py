"""Pytest configuration and fixtures."""

import os
from datetime import datetime

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("SEED_DATA", "false")

from fastapi.testclient import TestClient  # noqa: E402

from student_records_api.app.main import create_app  # noqa: E402
from student_records_api.app.repositories import InMemoryStudentStore, SQLiteStudentStore  # noqa: E402
from student_records_api.app.schemas.student import Address, Student  # noqa: E402
from student_records_api.app.services.student_service import StudentService  # noqa: E402


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStudentStore()


@pytest.fixture
def sqlite_store(tmp_path):
    """Empty SQLite store in a temporary file."""
    return SQLiteStudentStore(str(tmp_path / "students.db"))


@pytest.fixture
def service(store):
    return StudentService(store)


@pytest.fixture
def client(store):
    """HTTP client for an app serving ``store``, without seed data."""
    app = create_app(store=store, seed=False)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_student():
    """Factory for complete student records."""

    def _make(**overrides):
        fields = {
            "name": "John Doe",
            "email": "john.doe@example.com",
            "address": Address(street="123 Main St", city="Anytown", postcode=123),
            "age": 20,
            "courses": ["Math", "Science"],
            "full_time": True,
            "gpa": 3.5,
            "graduation_date": None,
            "register_date": datetime(2024, 7, 19, 8, 45, 5),
        }
        fields.update(overrides)
        return Student(**fields)

    return _make


@pytest.fixture
def student_payload():
    """JSON body of a complete student, as a client would send it."""
    return {
        "name": "A",
        "email": "a@x.com",
        "address": {"street": "1 Harbour Rd", "city": "Bikini Bottom", "postcode": 12345},
        "age": 10,
        "courses": ["X"],
        "fullTime": True,
        "gpa": 3.0,
        "registerDate": "2024-07-19T08:45:05",
    }
