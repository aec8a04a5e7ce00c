"""Create Student Controller — validates a request, delegates to CreateStudent, maps the outcome.

Invariants:
    - handle() always returns an HttpResponse; no Exception escapes it
    - Validation failure → 400 with the validator message; CreateStudent is not called
    - CreateStudent is awaited exactly once per valid request (no retry)
    - Truthy result → 201; falsy → 500 "error when trying to register user";
      raised fault → 500 "internal server error" (fault detail only in logs)
    - The result is never inspected beyond truthiness: it may not be a StudentRecord
    - Stateless: the only attribute is the injected CreateStudent

Design Decisions:
    - Impureim sandwich: pure validation (core/enforce_student) → single await → pure mapping
    - Every failure goes through _fail(): status, message and log level come from core/errors
"""

import logging

from student_api.core.capability_protocols import CreateStudent
from student_api.core.enforce_student import (
    build_student_input, validate_student_request,
)
from student_api.core.errors import (
    CapabilityFaultError,
    ErrorSeverity,
    RegistrationDeclinedError,
    StudentApiError,
    StudentValidationError,
)
from student_api.core.http_types import HttpRequest, HttpResponse, created

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class CreateStudentController:
    """Controller for POST /students."""

    def __init__(self, create_student: CreateStudent):
        self._create_student = create_student

    async def handle(self, request: HttpRequest) -> HttpResponse:
        # ── PURE: validate body ──
        error = validate_student_request(request.body)
        if error:
            return _fail(
                StudentValidationError(error["message"], error["field"]),
                field=error["field"],
            )

        student_data = build_student_input(request.body)

        # ── IMPURE: single delegated call ──
        try:
            record = await self._create_student.execute(student_data)
        except Exception as e:
            return _fail(CapabilityFaultError(e), exc_info=True)

        # ── PURE: map outcome ──
        if not record:
            return _fail(RegistrationDeclinedError())

        logger.info(
            "Student created",
            extra={"student_id": getattr(record, "id", None), "status_code": 201},
        )
        return created(record)


def _fail(err: StudentApiError, exc_info: bool = False, **extra) -> HttpResponse:
    """Log a failed outcome at its severity and build the response for it."""
    logger.log(
        _LOG_LEVELS[err.severity],
        f"Create student failed: {err.log_message}",
        extra={"error_code": err.code, "status_code": err.http_status, **extra},
        exc_info=exc_info,
    )
    return HttpResponse(status_code=err.http_status, body=err.message)
