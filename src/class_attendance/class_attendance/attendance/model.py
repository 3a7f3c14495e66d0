from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from ..catalog.model import Course
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status for a course on a date."""

    record_id: str
    student_id: str
    course_id: str
    date: str
    status: AttendanceStatus
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "student_id": self.student_id,
            "course_id": self.course_id,
            "date": self.date,
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class AttendanceStats:
    """Live counters over the statuses currently selected in the view."""

    total: int
    present: int = 0
    absent: int = 0
    late: int = 0

    @classmethod
    def from_statuses(cls, statuses: Mapping[str, AttendanceStatus], *, total: int) -> "AttendanceStats":
        values = list(statuses.values())
        return cls(
            total=total,
            present=values.count(AttendanceStatus.PRESENT),
            absent=values.count(AttendanceStatus.ABSENT),
            late=values.count(AttendanceStatus.LATE),
        )

    @property
    def attendance_percentage(self) -> float:
        if not self.total:
            return 0.0
        return round((self.present + self.late) / self.total * 100, 1)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "attendance_percentage": self.attendance_percentage,
        }


@dataclass(frozen=True)
class SaveSummary:
    course: Course
    date: str
    day_name: str
    records: tuple[AttendanceRecord, ...]
    stats: AttendanceStats

    @property
    def message(self) -> str:
        return (
            f"Attendance saved for {self.course.name} - {self.day_name}: "
            f"present {self.stats.present}, absent {self.stats.absent}, late {self.stats.late}"
        )

    def to_dict(self) -> dict:
        return {
            "course_id": self.course.course_id,
            "date": self.date,
            "day_name": self.day_name,
            "message": self.message,
            "records": [r.to_dict() for r in self.records],
            "stats": self.stats.to_dict(),
        }
