"""Container module - Centralized dependency injection.

Re-exports factory functions from submodules:

    from src.core.container import get_logger

Modules:
- infrastructure: Core services (logging)
"""

from src.core.container.infrastructure import get_logger

__all__ = [
    "get_logger",
]
