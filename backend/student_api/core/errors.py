"""Error Hierarchy — typed outcomes for create-student failures.

Invariants:
    - Every error has a code (str), severity (ErrorSeverity), http_status, and a
      fixed user-facing message
    - Validation errors are 400-level; registration errors are 500-level
    - log_message may carry internal detail; message never does

Design Decisions:
    - Single hierarchy with StudentApiError base: the controller reads status,
      message and severity from one place and turns them into a response
    - Errors are built, not raised, by the controller: handle() never throws
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class StudentApiError(Exception):
    """Base exception for all student API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.severity = severity
        self.http_status = http_status

    @property
    def log_message(self) -> str:
        return self.message


# ─── Domain Errors (400-level) ──────────────────────────────────

class StudentValidationError(StudentApiError):
    """A required field is missing or gender is outside its options."""
    def __init__(self, message: str, field: str):
        super().__init__(message, "VALIDATION_ERROR", ErrorSeverity.INFO, 400)
        self.field = field


# ─── Registration Errors (500-level) ────────────────────────────

class RegistrationDeclinedError(StudentApiError):
    """CreateStudent completed but produced no record."""
    def __init__(self):
        super().__init__(
            "error when trying to register user",
            "REGISTRATION_DECLINED", ErrorSeverity.WARNING, 500,
        )


class CapabilityFaultError(StudentApiError):
    """CreateStudent raised. The cause goes to logs only."""
    def __init__(self, cause: BaseException):
        super().__init__(
            "internal server error", "INTERNAL_ERROR", ErrorSeverity.ERROR, 500,
        )
        self.cause = cause

    @property
    def log_message(self) -> str:
        return f"{self.message}: CreateStudent raised {self.cause!r}"
