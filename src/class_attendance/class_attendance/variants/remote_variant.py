from __future__ import annotations

from ..catalog.model import Student
from ..core.constants import CONNECTION_MINUTES_MAX, CONNECTION_MINUTES_MIN
from ..core.enums import CourseType
from .base import REMOTE_LABELS, AttendanceVariant


class RemoteVariant(AttendanceVariant):
    """Online course: shows a simulated connection time per student."""

    course_type = CourseType.REMOTE
    title = "Remote class"
    subtitle = "Check connection and online participation"

    def describe(self, student: Student):
        minutes = self._rng.randint(CONNECTION_MINUTES_MIN, CONNECTION_MINUTES_MAX)
        return REMOTE_LABELS, f"Connection time: {minutes} min"
