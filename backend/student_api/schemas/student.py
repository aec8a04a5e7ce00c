"""Student Schemas — Pydantic models documenting the create-student API contract.

Invariants:
    - Request bodies are NOT parsed by Pydantic: the controller owns validation
      so that missing fields produce its exact 400 messages
    - StudentResponse mirrors core StudentRecord field for field

Design Decisions:
    - Schemas describe the 201 body in OpenAPI; serialization goes through
      jsonable_encoder so passthrough values are never coerced
"""

from pydantic import BaseModel, ConfigDict

from student_api.core.domain_types import Gender


class StudentResponse(BaseModel):
    """Created student — public-facing record."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 0, "name": "valid_name", "email": "valid_email",
                "gender": "male", "age": 25,
            },
        },
    )

    id: int
    name: str
    email: str
    gender: Gender
    age: int


CREATE_STUDENT_RESPONSES: dict = {
    201: {"model": StudentResponse, "description": "Student created"},
    400: {
        "description": "Missing field or invalid gender option",
        "content": {"application/json": {"schema": {
            "type": "string", "example": "no name was provided",
        }}},
    },
    500: {
        "description": "Registration declined or failed",
        "content": {"application/json": {"schema": {
            "type": "string", "example": "internal server error",
        }}},
    },
}
