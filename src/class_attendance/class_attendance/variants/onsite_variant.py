from __future__ import annotations

from ..catalog.model import Student
from ..core.enums import CourseType
from .base import ONSITE_LABELS, AttendanceVariant


class OnsiteVariant(AttendanceVariant):
    """Classroom course: physical presence, no extra metadata."""

    course_type = CourseType.ONSITE
    title = "Onsite class"
    subtitle = "Check physical presence in the classroom"

    def describe(self, student: Student):
        return ONSITE_LABELS, None
