"""HTTP middleware.

Exports:
    TraceMiddleware: Per-request trace ID propagation
    get_trace_id: Current request's trace ID
"""

from src.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = ["TraceMiddleware", "get_trace_id"]
