"""API Dependencies — wires the CreateStudent capability into controllers.

Invariants:
    - One CreateStudent instance per process (lru_cache)
    - Routes receive controllers through Depends, so tests swap them via dependency_overrides
"""

from functools import lru_cache

from fastapi import Depends

from student_api.core.capability_protocols import CreateStudent
from student_api.services.create_student import InMemoryCreateStudent
from student_api.services.create_student_controller import CreateStudentController


@lru_cache
def get_create_student() -> CreateStudent:
    return InMemoryCreateStudent()


def get_create_student_controller(
    create_student: CreateStudent = Depends(get_create_student),
) -> CreateStudentController:
    return CreateStudentController(create_student)
