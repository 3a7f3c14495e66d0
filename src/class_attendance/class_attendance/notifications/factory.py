from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from ..catalog.repository import StudentRepository
from ..common.datetime_utils import now_local
from .absence_alert import AbsenceAlertSubscriber
from .notification_log import NotificationLogSubscriber
from .statistics import StatisticsSubscriber


@dataclass
class SubscriberFactory:
    """Factory Pattern: build the subscribers an attendance view registers."""

    students: StudentRepository
    clock: Callable[[], datetime] = field(default=now_local)

    def notification_log(self, on_change=None) -> NotificationLogSubscriber:
        return NotificationLogSubscriber(self.students, on_change, clock=self.clock)

    def absence_alerts(self, on_alert=None) -> AbsenceAlertSubscriber:
        return AbsenceAlertSubscriber(self.students, on_alert)

    def statistics(self, on_change=None) -> StatisticsSubscriber:
        return StatisticsSubscriber(on_change, clock=self.clock)
