from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import EventKind
from ..events.dispatcher import Subscriber
from ..events.model import AttendanceEvent
from .model import StatisticsSnapshot


class StatisticsSubscriber(Subscriber):
    """Running counters over published events.

    ``most_active_hour`` is simply the hour of the latest event (last write
    wins), not a histogram.
    """

    def __init__(
        self,
        on_change: Optional[Callable[[StatisticsSnapshot], None]] = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._on_change = on_change
        self._clock = clock
        self._stats = StatisticsSnapshot()

    def snapshot(self) -> StatisticsSnapshot:
        return self._stats

    def handle(self, event: AttendanceEvent) -> None:
        now = self._clock()
        stats = replace(self._stats, last_update=now, most_active_hour=f"{now.hour}:00")

        if event.kind == EventKind.MARKED:
            stats = replace(stats, total_marked=stats.total_marked + 1)
        elif event.kind == EventKind.UPDATED:
            stats = replace(stats, changes_count=stats.changes_count + 1)

        self._stats = stats
        self._notify()

    def reset(self) -> None:
        self._stats = StatisticsSnapshot()
        self._notify()

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self._stats)
