"""Error Handlers — what the app answers when a request never reaches a controller.

Invariants:
    - Unparseable request bodies → 400 VALIDATION_ERROR with per-location details
    - Any other unhandled Exception → 500 INTERNAL_ERROR, no exception text in the body
    - Controller outcomes never pass through here: CreateStudentController returns
      responses instead of raising

Design Decisions:
    - One envelope builder shared by both handlers so clients parse a single shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from student_api.core.errors import ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the request-validation and catch-all handlers on the app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def request_validation_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.warning(
        f"Rejected unparseable body: {exc.errors()}",
        extra={"path": request.url.path, "status_code": 400},
    )
    details = [
        {"field": ".".join(str(loc) for loc in e["loc"]), "message": e["msg"]}
        for e in exc.errors()
    ]
    return _envelope(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR",
        "Invalid request data", ErrorSeverity.ERROR, details,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        extra={"path": request.url.path, "status_code": 500},
        exc_info=exc,
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
        "An unexpected error occurred", ErrorSeverity.CRITICAL,
    )


def _envelope(
    status_code: int,
    code: str,
    message: str,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> JSONResponse:
    error: dict = {"code": code, "message": message, "severity": severity.value}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})
