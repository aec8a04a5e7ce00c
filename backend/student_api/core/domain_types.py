"""Domain Types — rich types for student registration.

Invariants:
    - StudentId wraps int — assigned by the domain layer, never by a controller
    - Gender is a closed set: male, female, other (case-sensitive)
    - ValidatedStudentInput and StudentRecord are frozen (immutable once built)
    - ValidatedStudentInput never carries an id

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Gender: serializes to JSON without custom encoders
    - Frozen dataclasses over Pydantic in core: no validation side effects, no IO
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentId = NewType("StudentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Gender(str, Enum):
    """Accepted gender options for a student record."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


GENDER_OPTIONS: frozenset[str] = frozenset(g.value for g in Gender)


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ValidatedStudentInput:
    """Student data that passed request validation. Values pass through as received."""
    name: Any
    email: Any
    gender: Any
    age: Any

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "gender": self.gender,
            "age": self.age,
        }


@dataclass(frozen=True)
class StudentRecord:
    """A created student, as returned by the CreateStudent capability."""
    id: StudentId
    name: str
    email: str
    gender: str
    age: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "gender": self.gender,
            "age": self.age,
        }
