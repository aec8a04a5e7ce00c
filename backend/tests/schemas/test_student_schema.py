"""Student Schemas — StudentResponse mirrors StudentRecord."""

import pytest
from pydantic import ValidationError

from student_api.core.domain_types import Gender, StudentId, StudentRecord
from student_api.schemas.student import CREATE_STUDENT_RESPONSES, StudentResponse


def test_student_response_accepts_record_dict():
    record = StudentRecord(
        id=StudentId(0), name="valid_name", email="valid_email",
        gender="male", age=25,
    )
    resp = StudentResponse.model_validate(record.to_dict())
    assert resp.gender is Gender.MALE
    assert resp.model_dump(mode="json") == record.to_dict()


def test_student_response_rejects_unknown_gender():
    with pytest.raises(ValidationError):
        StudentResponse(id=0, name="n", email="e", gender="unknown", age=1)


def test_documented_status_codes():
    assert set(CREATE_STUDENT_RESPONSES) == {201, 400, 500}
