"""Per-session credential store.

One CredentialStore lives inside each console session and is handed to the
components that need it; nothing looks it up globally. All state is
volatile memory: the store is discarded together with its session.

Writes only ever happen from the request coroutine of the owning session,
so the store carries no lock. Sharing one store across OS threads would
require adding one.
"""

import base64

from src.core.constants import BASIC_PREFIX
from src.domain.value_objects import Credential


def encode_basic_auth(username: str, password: str) -> str:
    """Build an ``Authorization`` value of the form ``Basic base64(user:pass)``.

    Args:
        username: Operator login name.
        password: Operator password.

    Returns:
        str: Header value with the ``Basic`` prefix.
    """
    raw = f"{username}:{password}".encode("utf-8")
    return f"{BASIC_PREFIX}{base64.b64encode(raw).decode('ascii')}"


class CredentialStore:
    """Holds the current credential pair and the authenticated flag.

    Invariant: ``is_authenticated()`` is True only while a credential with
    both components non-empty is stored; ``basic_auth_header()`` re-checks
    this on every call.

    Example:
        >>> store = CredentialStore()
        >>> store.store("admin", "secret")
        >>> store.basic_auth_header()
        'Basic YWRtaW46c2VjcmV0'
        >>> store.clear()
        >>> store.is_authenticated()
        False
    """

    def __init__(self) -> None:
        self._credential: Credential | None = None
        self._authenticated: bool = False

    def store(self, username: str, password: str) -> None:
        """Remember the credential and mark the session authenticated.

        No validation happens here; AuthGateway only calls this after the
        Midas API accepted the pair.
        """
        self._credential = Credential(username=username, password=password)
        self._authenticated = True

    def clear(self) -> None:
        """Forget the credential and mark the session unauthenticated."""
        self._credential = None
        self._authenticated = False

    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def username(self) -> str | None:
        """Username of the stored credential, if any."""
        return self._credential.username if self._credential else None

    def basic_auth_header(self) -> str | None:
        """Return the Basic auth header for the stored credential.

        Returns:
            str | None: ``None`` when not authenticated or when either
            credential component is missing.
        """
        if not self._authenticated or self._credential is None:
            return None
        if not self._credential.is_complete:
            return None
        return encode_basic_auth(self._credential.username, self._credential.password)
