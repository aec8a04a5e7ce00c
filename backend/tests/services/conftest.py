"""Service test fixtures — CreateStudent stub and controller under test.

Invariants:
    - create_student_stub resolves with the fake record unless a test reconfigures it
    - sut is always built around the same stub the test receives

Design Decisions:
    - AsyncMock over a hand-written stub class: call assertions for free
"""

from unittest.mock import AsyncMock

import pytest

from student_api.core.domain_types import StudentId, StudentRecord
from student_api.services.create_student_controller import CreateStudentController


def make_fake_student_record() -> StudentRecord:
    return StudentRecord(
        id=StudentId(0),
        name="valid_name",
        email="valid_email",
        gender="male",
        age=25,
    )


@pytest.fixture
def fake_student_record() -> StudentRecord:
    return make_fake_student_record()


@pytest.fixture
def valid_body() -> dict:
    return {
        "name": "valid_name",
        "email": "valid_email",
        "gender": "male",
        "age": 25,
    }


@pytest.fixture
def create_student_stub(fake_student_record):
    stub = AsyncMock()
    stub.execute.return_value = fake_student_record
    return stub


@pytest.fixture
def sut(create_student_stub) -> CreateStudentController:
    return CreateStudentController(create_student_stub)
