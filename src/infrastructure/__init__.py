"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- logging/: Structured console logging (structlog) implementing LoggerProtocol

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
