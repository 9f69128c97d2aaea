"""LoggerProtocol: structured logging port.

Callers pass a constant message plus key-value context; adapters decide how
to render it (see ConsoleAdapter).

Levels used in this service:
    - DEBUG: registry contents at startup, OpenAPI annotation counts
    - INFO: startup/shutdown, rejected request input
    - WARNING: OpenAPI marker naming an unregistered coded enum
    - ERROR: unhandled exceptions
    - CRITICAL: startup cannot continue

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("Request validation failed", fields=["course_type"])
    logger.bind(trace_id=trace_id).debug("Echo")  # trace_id on every event
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: message + key-value context."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR.

        Args:
            message: Constant message; variable parts go in `context`.
            error: Exception whose type and message are added to the event.
            **context: Structured key-value fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL. Same arguments as error()."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds `context` to every event.

        The receiver is not modified.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
