from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from ..common.logging import get_logger
from .session import AttendanceSession

logger = get_logger(__name__)

DEFAULT_MAX_SESSIONS = 100


class SessionStore:
    """Live attendance sessions keyed by an opaque id.

    Each session gets its own lock; ``open`` holds it for the duration of the
    block so only one request at a time mutates a session's dispatcher.
    At most ``max_sessions`` are kept; creating one more discards (and
    unmounts) the least recently opened session.
    """

    def __init__(self, session_factory: Callable[[], AttendanceSession], *, max_sessions: int = DEFAULT_MAX_SESSIONS):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._session_factory = session_factory
        self._max_sessions = int(max_sessions)
        self._sessions: OrderedDict[str, tuple[AttendanceSession, threading.RLock]] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> str:
        session = self._session_factory()
        session.mount()
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = (session, threading.RLock())
            # Oldest first; unmounting happens in discard, outside the store lock.
            evicted = list(self._sessions)[: len(self._sessions) - self._max_sessions]
        for old_id in evicted:
            logger.info("Session limit %d reached, evicting %s", self._max_sessions, old_id)
            self.discard(old_id)
        return session_id

    def exists(self, session_id: Optional[str]) -> bool:
        return bool(session_id) and session_id in self._sessions

    @contextmanager
    def open(self, session_id: str) -> Iterator[AttendanceSession]:
        with self._lock:
            session, lock = self._sessions[session_id]
            self._sessions.move_to_end(session_id)
        with lock:
            yield session

    def discard(self, session_id: str) -> Optional[AttendanceSession]:
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        if not entry:
            return None
        session, lock = entry
        with lock:
            session.unmount()
        logger.info("Attendance session %s discarded", session_id)
        return session
