from __future__ import annotations

from datetime import datetime

from class_attendance.catalog.model import Student
from class_attendance.catalog.repository import InMemoryStudentRepository
from class_attendance.core.enums import AttendanceStatus
from class_attendance.events.model import AttendanceEvent
from class_attendance.notifications.notification_log import NotificationLogSubscriber


def fixed_clock():
    return datetime(2025, 3, 3, 9, 15, 30)


def test_messages_per_event_kind():
    log = NotificationLogSubscriber(InMemoryStudentRepository(), clock=fixed_clock)

    log.handle(AttendanceEvent.marked("1", "1", AttendanceStatus.ABSENT))
    log.handle(AttendanceEvent.updated("1", "1", AttendanceStatus.ABSENT, AttendanceStatus.LATE))
    log.handle(AttendanceEvent.stats_changed("1"))

    assert log.notifications == [
        "09:15:30: Statistics updated",
        "09:15:30: Ana García: changed from absent to late",
        "09:15:30: Ana García: marked as absent",
    ]


def test_log_keeps_five_most_recent():
    students = InMemoryStudentRepository(
        Student(student_id=str(i), name=f"Student {i}", email=f"s{i}@example.edu", student_code=f"S{i}")
        for i in range(1, 7)
    )
    log = NotificationLogSubscriber(students, clock=fixed_clock)

    for i in range(1, 7):
        log.handle(AttendanceEvent.marked(str(i), "1", AttendanceStatus.PRESENT))

    assert log.notifications == [f"09:15:30: Student {i}: marked as present" for i in (6, 5, 4, 3, 2)]


def test_unknown_student_placeholder():
    log = NotificationLogSubscriber(InMemoryStudentRepository(), clock=fixed_clock)

    log.handle(AttendanceEvent.marked("42", "1", AttendanceStatus.PRESENT))

    assert log.notifications == ["09:15:30: Unknown student: marked as present"]


def test_clear_and_change_callback():
    seen = []
    log = NotificationLogSubscriber(InMemoryStudentRepository(), seen.append, clock=fixed_clock)

    log.handle(AttendanceEvent.marked("1", "1", AttendanceStatus.PRESENT))
    log.clear()

    assert log.notifications == []
    assert seen == [["09:15:30: Ana García: marked as present"], []]


def test_notifications_is_a_copy():
    log = NotificationLogSubscriber(InMemoryStudentRepository(), clock=fixed_clock)
    log.handle(AttendanceEvent.marked("1", "1", AttendanceStatus.PRESENT))

    log.notifications.append("tampered")

    assert len(log.notifications) == 1
