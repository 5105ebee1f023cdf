"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- api/: httpx clients for the Midas API (auth, health, resources)
- logging/: structlog adapter implementing LoggerProtocol
- session/: in-memory console session registry

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
