"""HealthProbeProtocol used by the navigation guard."""

from typing import Protocol


class HealthProbeProtocol(Protocol):
    """Anything that can tell whether the Midas API is reachable."""

    async def is_backend_available(self) -> bool:
        """Return True when the Midas API answers below HTTP 500."""
        ...
