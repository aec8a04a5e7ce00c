"""API test fixtures — FastAPI test client with an overridable CreateStudent.

Invariants:
    - Every test gets a fresh InMemoryCreateStudent (ids restart at 0)
    - dependency_overrides cleared after each test

Design Decisions:
    - Override get_create_student, not the controller: routes still exercise the real controller
"""

import pytest
from httpx import ASGITransport, AsyncClient

from student_api.api.dependencies import get_create_student
from student_api.main import app
from student_api.services.create_student import InMemoryCreateStudent


@pytest.fixture
def create_student():
    return InMemoryCreateStudent()


@pytest.fixture
async def client(create_student):
    """FastAPI test client with CreateStudent dependency overridden."""
    app.dependency_overrides[get_create_student] = lambda: create_student

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
