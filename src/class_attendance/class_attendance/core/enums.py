from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class AttendanceStatus(str, Enum):
    """Attendance state a student can be marked with."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def parse(cls, value: "AttendanceStatus | str") -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid attendance status: {value!r}") from None


class EventKind(str, Enum):
    """What a published attendance event reports."""

    MARKED = "attendance_marked"
    UPDATED = "attendance_updated"
    STATS_CHANGED = "stats_changed"


class CourseType(str, Enum):
    """Delivery mode of a course; drives the attendance view variant."""

    ONSITE = "onsite"
    REMOTE = "remote"
    HYBRID = "hybrid"


class AlertTier(str, Enum):
    ATTENTION = "attention"
    CRITICAL = "critical"
    SEVERE = "severe"
    IMPROVEMENT = "improvement"
