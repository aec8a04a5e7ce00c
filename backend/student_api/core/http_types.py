"""HTTP Types — transport-neutral request/response shapes seen by controllers.

Invariants:
    - HttpRequest.body may be None or any mapping; controllers never assume keys exist
    - HttpResponse is immutable; body is an error message (str) or the created record
    - to_dict() emits the wire shape {statusCode, body}

Design Decisions:
    - Plain frozen dataclasses: controllers stay testable without FastAPI
"""

from dataclasses import dataclass
from typing import Any

from student_api.core.domain_types import StudentRecord


@dataclass(frozen=True)
class HttpRequest:
    body: Any = None
    params: dict[str, str] | None = None


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str | StudentRecord | None = None

    def to_dict(self) -> dict:
        body = self.body.to_dict() if isinstance(self.body, StudentRecord) else self.body
        return {"statusCode": self.status_code, "body": body}


def created(record: StudentRecord) -> HttpResponse:
    return HttpResponse(status_code=201, body=record)
