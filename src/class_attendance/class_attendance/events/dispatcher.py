from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..common.logging import get_logger
from .model import AttendanceEvent

logger = get_logger(__name__)


class Subscriber(ABC):
    """Observer Pattern: reacts to attendance events published by a dispatcher."""

    @abstractmethod
    def handle(self, event: AttendanceEvent) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class SubscriberFailure:
    subscriber: Subscriber
    error: Exception


class EventDispatcher:
    """Synchronous fan-out of attendance events to registered subscribers.

    Subscribers are notified in registration order. Registration is not
    idempotent: a subscriber registered twice receives every event twice.
    A subscriber raising from ``handle`` is logged and skipped; the remaining
    subscribers still receive the event.
    """

    def __init__(self):
        self._subscribers: list[Subscriber] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def register(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def unregister(self, subscriber: Subscriber) -> None:
        self._subscribers = [s for s in self._subscribers if s is not subscriber]

    def publish(self, event: AttendanceEvent) -> list[SubscriberFailure]:
        failures: list[SubscriberFailure] = []
        # Snapshot: handlers may register/unregister while we iterate.
        for subscriber in list(self._subscribers):
            try:
                subscriber.handle(event)
            except Exception as e:
                logger.exception(
                    "Subscriber %s failed on %s event for student %r",
                    type(subscriber).__name__,
                    event.kind.value,
                    event.student_id,
                )
                failures.append(SubscriberFailure(subscriber=subscriber, error=e))
        return failures
