"""Student Request Validation — presence and option checks for create-student bodies.

Invariants:
    - All functions are PURE: no IO, no async, no side effects, never raise
    - Return error dict on violation, None on success
    - Required fields checked in fixed order: name, email, gender, age — first error wins
    - A falsy value (None, "", 0, False, empty container) counts as missing
    - Unknown fields are ignored; values are never coerced or trimmed

Design Decisions:
    - Return dicts (not exceptions): same shape as every other error payload, and the
      controller turns the message straight into a 400 response
    - Falsy-as-missing kept for compatibility: an age of 0 is reported as missing
"""

from collections.abc import Mapping

from student_api.core.domain_types import GENDER_OPTIONS, ValidatedStudentInput

REQUIRED_FIELDS: tuple[str, ...] = ("name", "email", "gender", "age")


def _as_mapping(body: object) -> Mapping:
    return body if isinstance(body, Mapping) else {}


def check_required_fields(body: object) -> dict | None:
    """Rule 1: name, email, gender and age must all be present and truthy."""
    fields = _as_mapping(body)
    for field in REQUIRED_FIELDS:
        if not fields.get(field):
            return {
                "status": "error",
                "error_code": "MISSING_FIELD",
                "message": f"no {field} was provided",
                "field": field,
            }
    return None


def check_gender_option(body: object) -> dict | None:
    """Rule 2: gender must be one of male, female, other."""
    gender = _as_mapping(body).get("gender")
    if not (isinstance(gender, str) and gender in GENDER_OPTIONS):
        return {
            "status": "error",
            "error_code": "INVALID_GENDER",
            "message": "invalid gender option provided",
            "field": "gender",
        }
    return None


def validate_student_request(body: object) -> dict | None:
    """Chain all request checks. Returns first error or None."""
    return check_required_fields(body) or check_gender_option(body)


def build_student_input(body: Mapping) -> ValidatedStudentInput:
    """Extract exactly the required fields. Call only after validation passed."""
    return ValidatedStudentInput(
        name=body["name"],
        email=body["email"],
        gender=body["gender"],
        age=body["age"],
    )
