"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.auth_outcome import AuthOutcome
from src.domain.value_objects.credential import Credential

__all__ = ["AuthOutcome", "Credential"]
