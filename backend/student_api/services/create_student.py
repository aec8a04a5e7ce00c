"""In-Memory CreateStudent — process-local use case backing the HTTP route.

Invariants:
    - Ids are sequential ints starting at 0, assigned here and nowhere else
    - Records are built from the validated input unchanged
    - Nothing is stored besides the id counter

Design Decisions:
    - No database: the API owns no persisted state, records live only in the response
"""

import itertools
import logging

from student_api.core.domain_types import (
    StudentId, StudentRecord, ValidatedStudentInput,
)

logger = logging.getLogger(__name__)


class InMemoryCreateStudent:
    """CreateStudent implementation that only assigns ids."""

    def __init__(self, start_id: int = 0):
        self._ids = itertools.count(start_id)

    async def execute(
        self, student_data: ValidatedStudentInput,
    ) -> StudentRecord | None:
        record = StudentRecord(id=StudentId(next(self._ids)), **student_data.to_dict())
        logger.debug("Assigned student id", extra={"student_id": record.id})
        return record
