"""
In-memory registry of editor sessions.

Each browser session owns one EditorService. Sessions live in a thread-safe
TTL cache and disappear once they have been idle for the TTL; nothing is
persisted.
"""

import time
import uuid
from cachetools import TTLCache
from threading import Lock
from typing import Callable, Optional

from config.settings import settings
from services.editor_service import EditorService


class SessionStore:
    def __init__(self, maxsize: int, ttl: int, timer: Callable[[], float] = time.monotonic):
        self._sessions: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        self._lock = Lock()

    def create(self, session: EditorService) -> str:
        """
        Store a new session.

        Returns:
            The generated session id
        """
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = session
        return session_id

    def get(self, session_id: str) -> Optional[EditorService]:
        """
        Look up a session and refresh its TTL.

        Returns:
            The session if present and not expired, None otherwise
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions[session_id] = session
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            if session_id in self._sessions:
                del self._sessions[session_id]
                return True
            return False

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_session_store = SessionStore(maxsize=settings.SESSION_MAX_COUNT, ttl=settings.SESSION_TTL_SECONDS)


def get_session_store() -> SessionStore:
    return _session_store
