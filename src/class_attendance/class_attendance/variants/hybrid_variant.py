from __future__ import annotations

from ..catalog.model import Student
from ..core.enums import CourseType
from .base import ONSITE_LABELS, REMOTE_LABELS, AttendanceVariant


class HybridVariant(AttendanceVariant):
    """Mixed course: each student gets a random modality on every render."""

    course_type = CourseType.HYBRID
    title = "Hybrid class"
    subtitle = "Some students onsite, others remote"

    def describe(self, student: Student):
        if self._rng.random() > 0.5:
            return REMOTE_LABELS, "Modality: Remote"
        return ONSITE_LABELS, "Modality: Onsite"
