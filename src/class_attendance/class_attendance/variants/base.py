from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Sequence

from ..catalog.model import Student
from ..core.enums import AttendanceStatus, CourseType

ONSITE_LABELS: Mapping[AttendanceStatus, str] = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LATE: "Late",
}

REMOTE_LABELS: Mapping[AttendanceStatus, str] = {
    AttendanceStatus.PRESENT: "Connected",
    AttendanceStatus.ABSENT: "Disconnected",
    AttendanceStatus.LATE: "Late",
}


@dataclass
class AttendanceComponentProps:
    """Input shared by every attendance view variant."""

    students: Sequence[Student]
    attendance_data: Mapping[str, AttendanceStatus] = field(default_factory=dict)
    on_attendance_change: Optional[Callable[[str, AttendanceStatus], None]] = None


@dataclass(frozen=True)
class VariantRow:
    student_id: str
    name: str
    student_code: str
    selected: Optional[AttendanceStatus]
    labels: Mapping[AttendanceStatus, str]
    # Display-only; randomized per render and never fed back into state.
    metadata: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "student_code": self.student_code,
            "selected": self.selected.value if self.selected else None,
            "labels": {status.value: label for status, label in self.labels.items()},
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class VariantView:
    course_type: CourseType
    title: str
    subtitle: str
    rows: tuple[VariantRow, ...]

    def to_dict(self) -> dict:
        return {
            "course_type": self.course_type.value,
            "title": self.title,
            "subtitle": self.subtitle,
            "rows": [r.to_dict() for r in self.rows],
        }


class AttendanceVariant(ABC):
    """Strategy Pattern: how one course delivery type presents the roster.

    The status toggle itself is shared; variants only differ in labels and
    per-student metadata.
    """

    course_type: CourseType
    title: str
    subtitle: str

    def __init__(self, props: AttendanceComponentProps, *, rng: Optional[random.Random] = None):
        self.props = props
        self._rng = rng or random.Random()

    def render(self) -> VariantView:
        rows = tuple(self._row(student) for student in self.props.students)
        return VariantView(course_type=self.course_type, title=self.title, subtitle=self.subtitle, rows=rows)

    def change_status(self, student_id: str, status: AttendanceStatus | str) -> None:
        if self.props.on_attendance_change:
            self.props.on_attendance_change(student_id, AttendanceStatus.parse(status))

    def _row(self, student: Student) -> VariantRow:
        labels, metadata = self.describe(student)
        return VariantRow(
            student_id=student.student_id,
            name=student.name,
            student_code=student.student_code,
            selected=self.props.attendance_data.get(student.student_id),
            labels=labels,
            metadata=metadata,
        )

    @abstractmethod
    def describe(self, student: Student) -> tuple[Mapping[AttendanceStatus, str], Optional[str]]:
        """Button labels and metadata line for one student."""
        raise NotImplementedError
