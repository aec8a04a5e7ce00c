"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Record creation is accessed only through the CreateStudent protocol
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, stubs and AsyncMock satisfy it directly
    - Async in Protocol: implementations may do IO; the controller awaits exactly once
"""

from typing import Protocol

from student_api.core.domain_types import StudentRecord, ValidatedStudentInput
from student_api.core.http_types import HttpRequest, HttpResponse


class CreateStudent(Protocol):
    """Contract for the create-student use case — returns None when it declines."""
    async def execute(
        self, student_data: ValidatedStudentInput,
    ) -> StudentRecord | None: ...


class Controller(Protocol):
    """Contract for request controllers — always return a response, never raise."""
    async def handle(self, request: HttpRequest) -> HttpResponse: ...
