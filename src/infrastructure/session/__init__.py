"""Console session storage."""

from src.infrastructure.session.memory_session_registry import MemorySessionRegistry

__all__ = ["MemorySessionRegistry"]
