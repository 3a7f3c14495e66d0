from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..catalog.repository import StudentRepository, resolve_student_name
from ..common.datetime_utils import now_local
from ..core.constants import NOTIFICATION_LOG_LIMIT
from ..core.enums import EventKind
from ..events.dispatcher import Subscriber
from ..events.model import AttendanceEvent


class NotificationLogSubscriber(Subscriber):
    """Recent-activity log: the last few events as display strings, newest first."""

    def __init__(
        self,
        students: StudentRepository,
        on_change: Optional[Callable[[list[str]], None]] = None,
        *,
        clock: Callable[[], datetime] = now_local,
        limit: int = NOTIFICATION_LOG_LIMIT,
    ):
        self._students = students
        self._on_change = on_change
        self._clock = clock
        self._limit = int(limit)
        self._notifications: list[str] = []

    @property
    def notifications(self) -> list[str]:
        return list(self._notifications)

    def handle(self, event: AttendanceEvent) -> None:
        message = self._format(event)
        self._notifications.insert(0, f"{self._clock().strftime('%H:%M:%S')}: {message}")
        del self._notifications[self._limit:]
        self._notify()

    def clear(self) -> None:
        self._notifications = []
        self._notify()

    def _format(self, event: AttendanceEvent) -> str:
        if event.kind == EventKind.STATS_CHANGED:
            return "Statistics updated"

        student = resolve_student_name(self._students, event.student_id)
        if event.kind == EventKind.UPDATED:
            previous = event.previous_status.value if event.previous_status else "-"
            return f"{student}: changed from {previous} to {event.new_status.value}"
        return f"{student}: marked as {event.new_status.value}"

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(list(self._notifications))
