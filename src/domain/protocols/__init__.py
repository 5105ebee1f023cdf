"""Domain protocols (ports).

Usage:
    from src.domain.protocols import LoggerProtocol, AuthApiProtocol
"""

from src.domain.protocols.health_probe_protocol import HealthProbeProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.midas_api_protocol import (
    AuthApiProtocol,
    HealthApiProtocol,
    ResourceApiProtocol,
)

__all__ = [
    "AuthApiProtocol",
    "HealthApiProtocol",
    "HealthProbeProtocol",
    "LoggerProtocol",
    "ResourceApiProtocol",
]
