from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus, EventKind


@dataclass(frozen=True)
class AttendanceEvent:
    """One user action on the attendance view, as seen by subscribers."""

    kind: EventKind
    student_id: str
    course_id: str
    new_status: AttendanceStatus
    previous_status: Optional[AttendanceStatus] = None
    timestamp: datetime = field(default_factory=now_local)

    @classmethod
    def marked(
        cls,
        student_id: str,
        course_id: str,
        new_status: AttendanceStatus,
        *,
        timestamp: Optional[datetime] = None,
    ) -> "AttendanceEvent":
        return cls(
            kind=EventKind.MARKED,
            student_id=student_id,
            course_id=course_id,
            new_status=new_status,
            timestamp=timestamp or now_local(),
        )

    @classmethod
    def updated(
        cls,
        student_id: str,
        course_id: str,
        previous_status: AttendanceStatus,
        new_status: AttendanceStatus,
        *,
        timestamp: Optional[datetime] = None,
    ) -> "AttendanceEvent":
        return cls(
            kind=EventKind.UPDATED,
            student_id=student_id,
            course_id=course_id,
            previous_status=previous_status,
            new_status=new_status,
            timestamp=timestamp or now_local(),
        )

    @classmethod
    def stats_changed(cls, course_id: str, *, timestamp: Optional[datetime] = None) -> "AttendanceEvent":
        # PRESENT is a placeholder; statistics events carry no real status.
        return cls(
            kind=EventKind.STATS_CHANGED,
            student_id="",
            course_id=course_id,
            new_status=AttendanceStatus.PRESENT,
            timestamp=timestamp or now_local(),
        )
