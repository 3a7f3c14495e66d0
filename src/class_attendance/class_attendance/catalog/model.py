from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CourseType


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the class roster."""

    student_id: str
    name: str
    email: str
    student_code: str


@dataclass(frozen=True)
class Course:
    """Domain entity: a course attendance is taken for.

    ``course_type`` selects the attendance view variant.
    """

    course_id: str
    name: str
    code: str
    course_type: CourseType
    faculty: str
    program: str
