"""In-memory console session registry.

Maps the opaque id carried by the session cookie to its ConsoleSession.
Sessions live in process memory only and expire after a period of
inactivity; expired sessions are swept on every access.

Anonymous requests get a transient session that is never stored. A session
is registered (under a freshly generated id) only when a login succeeds,
and the registry holds at most ``max_sessions`` entries: registering past
the limit evicts the least recently seen session.

Note:
    Not shared across worker processes. Run the console with a single
    worker, or sessions (and logins) will not follow the operator.
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.application.services.console_session import ConsoleSession
from src.core.constants import SESSION_ID_BYTES


def _new_session_id() -> str:
    return secrets.token_urlsafe(SESSION_ID_BYTES)


class MemorySessionRegistry:
    """Dict-backed session registry with idle expiry and a size cap.

    Usage:
        registry = MemorySessionRegistry(idle_timeout=timedelta(minutes=60), max_sessions=1000)
        session = registry.open(request.cookies.get("midas_session"))
        ...
        registry.register(session)  # after a successful login
    """

    def __init__(self, *, idle_timeout: timedelta, max_sessions: int) -> None:
        self._idle_timeout = idle_timeout
        self._max_sessions = max_sessions
        self._sessions: dict[str, ConsoleSession] = {}

    def _cleanup_expired(self, now: datetime) -> None:
        expired_ids = [
            session_id
            for session_id, session in self._sessions.items()
            if session.is_expired(self._idle_timeout, now)
        ]
        for session_id in expired_ids:
            del self._sessions[session_id]

    def _evict_least_recently_seen(self) -> None:
        while len(self._sessions) >= self._max_sessions:
            oldest = min(self._sessions.values(), key=lambda s: s.last_seen_at)
            del self._sessions[oldest.session_id]

    def get(self, session_id: str | None) -> ConsoleSession | None:
        """Return the live session for ``session_id`` and mark it seen.

        Returns:
            ConsoleSession | None: None for unknown or expired ids.
        """
        now = datetime.now(UTC)
        self._cleanup_expired(now)
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is not None:
            session.touch(now)
        return session

    def open(self, session_id: str | None) -> ConsoleSession:
        """Resolve the cookie's session, or start a transient one.

        A transient session is not stored; it is dropped with the request
        unless ``register`` is called for it.
        """
        session = self.get(session_id)
        if session is not None:
            return session
        now = datetime.now(UTC)
        return ConsoleSession(session_id=_new_session_id(), created_at=now, last_seen_at=now)

    def register(self, session: ConsoleSession) -> ConsoleSession:
        """Store ``session`` under a newly generated id.

        A session that was already registered loses its previous id, so an id
        known before login never identifies the logged-in session.

        Returns:
            ConsoleSession: The same session, carrying its new id.
        """
        if self.is_registered(session):
            del self._sessions[session.session_id]

        self._cleanup_expired(datetime.now(UTC))
        self._evict_least_recently_seen()

        session.session_id = _new_session_id()
        session.touch()
        self._sessions[session.session_id] = session
        return session

    def is_registered(self, session: ConsoleSession) -> bool:
        return self._sessions.get(session.session_id) is session

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def clear_all(self) -> None:
        self._sessions.clear()

    def session_count(self) -> int:
        return len(self._sessions)
