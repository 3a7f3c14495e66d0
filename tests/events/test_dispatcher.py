from __future__ import annotations

import logging

from class_attendance.core.enums import AttendanceStatus
from class_attendance.events.dispatcher import EventDispatcher, Subscriber
from class_attendance.events.model import AttendanceEvent


class RecordingSubscriber(Subscriber):
    def __init__(self, name: str, journal: list):
        self.name = name
        self.journal = journal

    def handle(self, event: AttendanceEvent) -> None:
        self.journal.append((self.name, event))


class FailingSubscriber(Subscriber):
    def handle(self, event: AttendanceEvent) -> None:
        raise RuntimeError("boom")


def _event() -> AttendanceEvent:
    return AttendanceEvent.marked("1", "1", AttendanceStatus.PRESENT)


def test_publish_follows_registration_order():
    journal = []
    dispatcher = EventDispatcher()
    for name in ("a", "b", "c"):
        dispatcher.register(RecordingSubscriber(name, journal))

    event = _event()
    dispatcher.publish(event)

    assert [name for name, _ in journal] == ["a", "b", "c"]
    assert all(e is event for _, e in journal)


def test_failing_subscriber_does_not_stop_fan_out(caplog):
    journal = []
    first = RecordingSubscriber("first", journal)
    failing = FailingSubscriber()
    last = RecordingSubscriber("last", journal)

    dispatcher = EventDispatcher()
    dispatcher.register(first)
    dispatcher.register(failing)
    dispatcher.register(last)

    with caplog.at_level(logging.ERROR):
        failures = dispatcher.publish(_event())

    assert [name for name, _ in journal] == ["first", "last"]
    assert len(failures) == 1
    assert failures[0].subscriber is failing
    assert isinstance(failures[0].error, RuntimeError)
    assert "FailingSubscriber" in caplog.text
    # Registry untouched by the failure.
    assert dispatcher.subscribers == (first, failing, last)


def test_duplicate_registration_delivers_twice():
    journal = []
    sub = RecordingSubscriber("dup", journal)
    dispatcher = EventDispatcher()
    dispatcher.register(sub)
    dispatcher.register(sub)

    dispatcher.publish(_event())

    assert len(journal) == 2


def test_unregister_removes_every_entry_of_that_subscriber():
    journal = []
    sub = RecordingSubscriber("dup", journal)
    other = RecordingSubscriber("other", journal)
    dispatcher = EventDispatcher()
    dispatcher.register(sub)
    dispatcher.register(other)
    dispatcher.register(sub)

    dispatcher.unregister(sub)
    dispatcher.publish(_event())

    assert dispatcher.subscribers == (other,)
    assert [name for name, _ in journal] == ["other"]


def test_unregister_unknown_subscriber_is_noop():
    dispatcher = EventDispatcher()
    dispatcher.register(RecordingSubscriber("a", []))

    dispatcher.unregister(RecordingSubscriber("a", []))

    assert len(dispatcher) == 1


def test_unregister_during_publish_does_not_skip_remaining():
    journal = []
    dispatcher = EventDispatcher()

    class SelfRemoving(Subscriber):
        def handle(self, event):
            journal.append("self")
            dispatcher.unregister(self)

    dispatcher.register(SelfRemoving())
    dispatcher.register(RecordingSubscriber("next", journal))

    first, second = _event(), _event()
    dispatcher.publish(first)
    dispatcher.publish(second)

    assert journal == ["self", ("next", first), ("next", second)]
