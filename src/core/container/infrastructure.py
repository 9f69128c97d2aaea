"""Infrastructure dependency factories.

Application-scoped singletons for infrastructure services:
- Logging (structlog console adapter)

Usage:
    # Application code
    from src.core.container import get_logger

    logger = get_logger()

    # Presentation Layer (FastAPI Depends)
    logger: LoggerProtocol = Depends(get_logger)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.enums import Environment

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
