from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.constants import UNKNOWN_STUDENT_NAME
from .mock_data import MOCK_COURSES, MOCK_STUDENTS
from .model import Course, Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def get_by_id(self, course_id: str) -> Optional[Course]:
        raise NotImplementedError


class InMemoryStudentRepository:
    """Roster backed by a fixed tuple; order is preserved for display."""

    def __init__(self, students: Iterable[Student] = MOCK_STUDENTS):
        self._students = tuple(students)
        self._by_id = {s.student_id: s for s in self._students}

    def list_all(self) -> Sequence[Student]:
        return list(self._students)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._by_id.get(str(student_id))


class InMemoryCourseRepository:
    def __init__(self, courses: Iterable[Course] = MOCK_COURSES):
        self._courses = tuple(courses)
        self._by_id = {c.course_id: c for c in self._courses}

    def list_all(self) -> Sequence[Course]:
        return list(self._courses)

    def get_by_id(self, course_id: str) -> Optional[Course]:
        return self._by_id.get(str(course_id))


def resolve_student_name(students: StudentRepository, student_id: str) -> str:
    """Display name for ``student_id``; never raises on unknown ids."""
    student = students.get_by_id(student_id)
    if not student:
        return UNKNOWN_STUDENT_NAME
    return student.name
