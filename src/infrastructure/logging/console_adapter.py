"""structlog-backed logger writing one event per line to stdout.

Rendering depends on where the service runs:
    - development: colored key=value lines
    - testing/ci/production: one JSON object per line

Each event carries the ISO-8601 UTC timestamp, the level and any context
bound through `structlog.contextvars` (TraceMiddleware binds `trace_id`).

ConsoleAdapter satisfies LoggerProtocol structurally; it does not inherit
from it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _exception_context(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    """Flatten an exception into `error_type` / `error_message` keys."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json (bool): Render JSON lines instead of colored console output.
        level (str): Lowest level name that is emitted, e.g. "INFO".
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ]
        min_level = logging.getLevelNamesMapping()[level.upper()]

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR; `error` is flattened into type and message keys."""
        self._logger.error(message, **_exception_context(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL; `error` is flattened into type and message keys."""
        self._logger.critical(message, **_exception_context(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return an adapter whose events all carry `context`.

        The receiver is left unchanged.
        """
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
