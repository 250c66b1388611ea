"""Solutions to the generics section: a generic wrapper and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
G = TypeVar("G")


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[G]):
    """A report card whose grade may be numeric or alphabetical."""

    grade: G
    student_name: str
    student_age: int

    def render(self) -> str:
        """Describe the student and their grade."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )