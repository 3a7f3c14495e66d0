from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from .attendance.session import AttendanceSession
from .attendance.store import DEFAULT_MAX_SESSIONS, SessionStore
from .catalog.repository import InMemoryCourseRepository, InMemoryStudentRepository


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    courses_repo: InMemoryCourseRepository
    sessions: SessionStore
    alert_display_limit: int


def build_container(*, alert_display_limit: int = 10, max_sessions: int = DEFAULT_MAX_SESSIONS) -> Container:
    students_repo = InMemoryStudentRepository()
    courses_repo = InMemoryCourseRepository()
    sessions = SessionStore(partial(AttendanceSession, students_repo, courses_repo), max_sessions=max_sessions)

    return Container(
        students_repo=students_repo,
        courses_repo=courses_repo,
        sessions=sessions,
        alert_display_limit=int(alert_display_limit),
    )
