from __future__ import annotations

from class_attendance.catalog.repository import InMemoryStudentRepository
from class_attendance.core.enums import AlertTier, AttendanceStatus
from class_attendance.events.model import AttendanceEvent
from class_attendance.notifications.absence_alert import AbsenceAlertSubscriber


def _mark(sub: AbsenceAlertSubscriber, student_id: str, status: AttendanceStatus) -> None:
    sub.handle(AttendanceEvent.marked(student_id, "1", status))


def test_alert_tiers_for_consecutive_absences():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())

    tiers_by_count = {}
    for n in range(1, 9):
        before = len(sub.alerts)
        _mark(sub, "1", AttendanceStatus.ABSENT)
        tiers_by_count[n] = [a.tier for a in sub.alerts[before:]]

    assert tiers_by_count[1] == []
    assert tiers_by_count[2] == []
    assert tiers_by_count[3] == [AlertTier.ATTENTION]
    assert tiers_by_count[4] == []
    assert tiers_by_count[5] == [AlertTier.CRITICAL]
    assert tiers_by_count[6] == [AlertTier.SEVERE]
    assert tiers_by_count[7] == [AlertTier.SEVERE]
    assert tiers_by_count[8] == [AlertTier.SEVERE]
    assert sub.absence_counts() == {"1": 8}


def test_alert_messages_name_the_student():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    for _ in range(6):
        _mark(sub, "2", AttendanceStatus.ABSENT)

    messages = [a.message for a in sub.alerts]
    assert messages[0].startswith("ATTENTION: Carlos Rodríguez has 3")
    assert messages[1].startswith("CRITICAL ALERT: Carlos Rodríguez has 5")
    assert messages[2].startswith("SEVERE: Carlos Rodríguez has 6")


def test_present_after_streak_emits_improvement_and_resets():
    received = []
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository(), on_alert=received.append)
    for _ in range(3):
        _mark(sub, "1", AttendanceStatus.ABSENT)

    _mark(sub, "1", AttendanceStatus.PRESENT)

    assert [a.tier for a in received] == [AlertTier.ATTENTION, AlertTier.IMPROVEMENT]
    assert received[-1].absence_count == 3
    assert sub.absence_counts()["1"] == 0


def test_present_with_short_streak_resets_silently():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    _mark(sub, "1", AttendanceStatus.ABSENT)
    _mark(sub, "1", AttendanceStatus.ABSENT)

    _mark(sub, "1", AttendanceStatus.PRESENT)

    assert sub.alerts == []
    assert sub.absence_counts()["1"] == 0


def test_present_without_absences_emits_nothing():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())

    _mark(sub, "1", AttendanceStatus.PRESENT)

    assert sub.alerts == []
    assert sub.absence_counts() == {}


def test_late_does_not_touch_streak():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    _mark(sub, "1", AttendanceStatus.ABSENT)
    _mark(sub, "1", AttendanceStatus.ABSENT)
    _mark(sub, "1", AttendanceStatus.LATE)
    _mark(sub, "1", AttendanceStatus.ABSENT)

    assert sub.absence_counts() == {"1": 3}
    assert [a.tier for a in sub.alerts] == [AlertTier.ATTENTION]


def test_streaks_are_tracked_per_student():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    for _ in range(3):
        _mark(sub, "1", AttendanceStatus.ABSENT)
        _mark(sub, "2", AttendanceStatus.ABSENT)

    assert sub.absence_counts() == {"1": 3, "2": 3}
    assert [a.student_id for a in sub.alerts] == ["1", "2"]


def test_absence_counts_is_a_copy():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    _mark(sub, "1", AttendanceStatus.ABSENT)

    counts = sub.absence_counts()
    counts["1"] = 99

    assert sub.absence_counts() == {"1": 1}


def test_unknown_student_uses_placeholder_name():
    sub = AbsenceAlertSubscriber(InMemoryStudentRepository())
    for _ in range(3):
        _mark(sub, "404", AttendanceStatus.ABSENT)

    assert sub.alerts[0].student_name == "Unknown student"
