from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AlertTier


@dataclass(frozen=True)
class Alert:
    """Absence-streak alert raised for one student."""

    tier: AlertTier
    student_id: str
    student_name: str
    absence_count: int
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Read-model of the aggregate statistics subscriber."""

    total_marked: int = 0
    changes_count: int = 0
    most_active_hour: str = ""
    last_update: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "total_marked": self.total_marked,
            "changes_count": self.changes_count,
            "most_active_hour": self.most_active_hour,
            "last_update": self.last_update.isoformat() if self.last_update else None,
        }
