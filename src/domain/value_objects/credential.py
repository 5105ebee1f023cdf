"""Operator credential value object."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credential:
    """Username/password pair held for the lifetime of a console session.

    The password is excluded from ``repr`` so a credential can never end up
    in a log line or traceback by accident.

    Attributes:
        username: Operator login name.
        password: Operator password, sent to the Midas API as Basic auth.
    """

    username: str
    password: str = field(repr=False)

    @property
    def is_complete(self) -> bool:
        """Both components are present and non-empty."""
        return bool(self.username) and bool(self.password)
