from __future__ import annotations

from typing import Callable, Optional

from ..catalog.repository import StudentRepository, resolve_student_name
from ..common.logging import get_logger
from ..core.constants import ABSENCE_ATTENTION_THRESHOLD, ABSENCE_CRITICAL_THRESHOLD
from ..core.enums import AlertTier, AttendanceStatus
from ..events.dispatcher import Subscriber
from ..events.model import AttendanceEvent
from .model import Alert

logger = get_logger(__name__)


class AbsenceAlertSubscriber(Subscriber):
    """Tracks consecutive absences per student and raises tiered alerts.

    - ABSENT increments the streak; alerts fire at exactly 3 (attention),
      exactly 5 (critical) and on every absence after 5 (severe).
    - PRESENT resets a non-zero streak, with an improvement alert when the
      streak had reached the attention threshold.
    - LATE leaves the streak unchanged.
    """

    def __init__(self, students: StudentRepository, on_alert: Optional[Callable[[Alert], None]] = None):
        self._students = students
        self._on_alert = on_alert
        self._absence_counts: dict[str, int] = {}
        self._alerts: list[Alert] = []

    @property
    def alerts(self) -> list[Alert]:
        return list(self._alerts)

    def absence_counts(self) -> dict[str, int]:
        return dict(self._absence_counts)

    def clear_alerts(self) -> None:
        self._alerts = []

    def handle(self, event: AttendanceEvent) -> None:
        student_id = event.student_id
        current = self._absence_counts.get(student_id, 0)

        if event.new_status == AttendanceStatus.ABSENT:
            count = current + 1
            self._absence_counts[student_id] = count
            tier = self._tier_for(count)
            if tier:
                self._emit(tier, student_id, count)
        elif event.new_status == AttendanceStatus.PRESENT and current > 0:
            if current >= ABSENCE_ATTENTION_THRESHOLD:
                self._emit(AlertTier.IMPROVEMENT, student_id, current)
            self._absence_counts[student_id] = 0

    @staticmethod
    def _tier_for(count: int) -> Optional[AlertTier]:
        if count == ABSENCE_ATTENTION_THRESHOLD:
            return AlertTier.ATTENTION
        if count == ABSENCE_CRITICAL_THRESHOLD:
            return AlertTier.CRITICAL
        if count > ABSENCE_CRITICAL_THRESHOLD:
            return AlertTier.SEVERE
        return None

    def _emit(self, tier: AlertTier, student_id: str, count: int) -> None:
        name = resolve_student_name(self._students, student_id)
        message = {
            AlertTier.ATTENTION: f"ATTENTION: {name} has {count} consecutive absences",
            AlertTier.CRITICAL: f"CRITICAL ALERT: {name} has {count} absences - contact immediately",
            AlertTier.SEVERE: f"SEVERE: {name} has {count} absences - intervention required",
            AlertTier.IMPROVEMENT: f"IMPROVEMENT: {name} is back in class",
        }[tier]

        alert = Alert(tier=tier, student_id=student_id, student_name=name, absence_count=count, message=message)
        self._alerts.append(alert)
        logger.warning("Absence alert: %s", message)
        if self._on_alert:
            self._on_alert(alert)
