"""Core shared kernel.

Foundational pieces used by every layer of the console:
- Result types for errors-as-data
- The DomainError base class and its ErrorCode enum
- Settings and internal constants

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
