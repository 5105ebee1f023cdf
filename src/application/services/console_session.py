"""State held for one operator's browser session.

A ConsoleSession is created by the session registry when a browser first
arrives without a valid cookie and discarded when it goes idle. It is the
explicit context object handed to the gateway and the guard; nothing reaches
the credential store through a global.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from src.application.services.credential_store import CredentialStore


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, kw_only=True)
class ConsoleSession:
    """Mutable per-session state.

    Attributes:
        session_id: Opaque id carried by the session cookie.
        credentials: The session's CredentialStore.
        layout_initialized: One-time UI setup flag, set by the first
            navigation the guard evaluates.
        created_at: When the session was created (UTC).
        last_seen_at: Last request seen for the session (UTC).
    """

    session_id: str
    credentials: CredentialStore = field(default_factory=CredentialStore)
    layout_initialized: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    last_seen_at: datetime = field(default_factory=_utcnow)

    def touch(self, now: datetime | None = None) -> None:
        self.last_seen_at = now or _utcnow()

    def is_expired(self, idle_timeout: timedelta, now: datetime | None = None) -> bool:
        """True when no request was seen for longer than ``idle_timeout``."""
        return (now or _utcnow()) - self.last_seen_at > idle_timeout
