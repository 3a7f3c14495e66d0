from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Optional

from ..catalog.model import Course
from ..catalog.repository import CourseRepository, StudentRepository
from ..common.datetime_utils import day_name, now_local, parse_iso_date
from ..common.logging import get_logger
from ..core.constants import DEFAULT_ALERT_DISPLAY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import UnknownCourseError, UnknownStudentError, ValidationError
from ..events.dispatcher import EventDispatcher, SubscriberFailure
from ..events.model import AttendanceEvent
from ..notifications.factory import SubscriberFactory
from ..notifications.model import Alert, StatisticsSnapshot
from ..variants.base import AttendanceComponentProps, VariantView
from ..variants.factory import select_component
from .model import AttendanceRecord, AttendanceStats, SaveSummary

logger = get_logger(__name__)


class AttendanceSession:
    """Attendance-taking view for one user.

    Owns its dispatcher and subscribers: they are registered on ``mount`` and
    dropped on ``unmount``; their state lives only as long as the session.
    All methods run synchronously on the caller's thread and expect a single
    caller at a time.
    """

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
        *,
        dispatcher: Optional[EventDispatcher] = None,
        subscriber_factory: Optional[SubscriberFactory] = None,
        clock: Callable[[], datetime] = now_local,
        rng: Optional[random.Random] = None,
    ):
        self._students = students
        self._courses = courses
        self._clock = clock
        self._rng = rng
        self.dispatcher = dispatcher or EventDispatcher()

        factory = subscriber_factory or SubscriberFactory(students, clock=clock)
        self.notification_log = factory.notification_log()
        self.absence_alerts = factory.absence_alerts()
        self.statistics = factory.statistics()

        self._mounted = False
        self._course: Optional[Course] = None
        self._date: Optional[str] = None
        self._attendance: dict[str, AttendanceStatus] = {}

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def course(self) -> Optional[Course]:
        return self._course

    @property
    def date(self) -> Optional[str]:
        return self._date

    @property
    def attendance(self) -> dict[str, AttendanceStatus]:
        return dict(self._attendance)

    def mount(self) -> None:
        if self._mounted:
            return
        self.dispatcher.register(self.notification_log)
        self.dispatcher.register(self.absence_alerts)
        self.dispatcher.register(self.statistics)
        self._mounted = True
        logger.info("Attendance session mounted")

    def unmount(self) -> None:
        if not self._mounted:
            return
        self.dispatcher.unregister(self.notification_log)
        self.dispatcher.unregister(self.absence_alerts)
        self.dispatcher.unregister(self.statistics)
        self._mounted = False
        logger.info("Attendance session unmounted")

    def select_course(self, course_id: str) -> Course:
        course = self._courses.get_by_id(course_id)
        if not course:
            raise UnknownCourseError(f"Course {course_id!r} does not exist")
        self._course = course
        # Switching course starts a fresh sheet.
        self._attendance = {}
        return course

    def select_date(self, value: str) -> str:
        self._date = parse_iso_date(value).isoformat()
        return self._date

    def change_status(self, student_id: str, status: AttendanceStatus | str) -> AttendanceEvent:
        student_id = str(student_id)
        new_status = AttendanceStatus.parse(status)
        if not self._students.get_by_id(student_id):
            raise UnknownStudentError(f"Student {student_id!r} is not on the roster")

        previous = self._attendance.get(student_id)
        self._attendance[student_id] = new_status

        course_id = self._course.course_id if self._course else ""
        if previous:
            event = AttendanceEvent.updated(student_id, course_id, previous, new_status, timestamp=self._clock())
        else:
            event = AttendanceEvent.marked(student_id, course_id, new_status, timestamp=self._clock())
        self._publish(event)
        return event

    def mark_all_present(self) -> list[AttendanceEvent]:
        return [
            self.change_status(student.student_id, AttendanceStatus.PRESENT)
            for student in self._students.list_all()
            if self._attendance.get(student.student_id) != AttendanceStatus.PRESENT
        ]

    def clear_selections(self) -> None:
        self._attendance = {}

    def stats(self) -> AttendanceStats:
        return AttendanceStats.from_statuses(self._attendance, total=len(self._students.list_all()))

    def render(self) -> VariantView:
        if not self._course:
            raise ValidationError("Select a course first")
        props = AttendanceComponentProps(
            students=self._students.list_all(),
            attendance_data=dict(self._attendance),
            on_attendance_change=self.change_status,
        )
        return select_component(self._course.course_type, props, rng=self._rng).render()

    def save(self) -> SaveSummary:
        if not self._course or not self._date:
            raise ValidationError("Select a course and a date")

        now = self._clock()
        course_id = self._course.course_id
        records = tuple(
            AttendanceRecord(
                record_id=f"{student_id}-{course_id}-{self._date}",
                student_id=student_id,
                course_id=course_id,
                date=self._date,
                status=status,
                timestamp=now,
            )
            for student_id, status in self._attendance.items()
        )
        summary = SaveSummary(
            course=self._course,
            date=self._date,
            day_name=day_name(self._date),
            records=records,
            stats=self.stats(),
        )
        logger.info("Saved %d attendance records for course %s on %s", len(records), course_id, self._date)

        self._publish(AttendanceEvent.stats_changed(course_id, timestamp=now))
        return summary

    def notifications(self) -> list[str]:
        return self.notification_log.notifications

    def clear_notifications(self) -> None:
        self.notification_log.clear()

    def alerts(self, limit: Optional[int] = DEFAULT_ALERT_DISPLAY_LIMIT) -> list[Alert]:
        items = list(reversed(self.absence_alerts.alerts))
        return items[:limit] if limit is not None else items

    def clear_alerts(self) -> None:
        self.absence_alerts.clear_alerts()

    def observer_stats(self) -> StatisticsSnapshot:
        return self.statistics.snapshot()

    def reset_statistics(self) -> None:
        self.statistics.reset()

    def _publish(self, event: AttendanceEvent) -> list[SubscriberFailure]:
        return self.dispatcher.publish(event)
