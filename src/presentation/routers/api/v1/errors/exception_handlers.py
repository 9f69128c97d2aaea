"""Global exception handlers rendering RFC 7807 Problem Details.

Handlers:
    http_exception_handler: Starlette HTTPException, including router 404/405
    validation_exception_handler: RequestValidationError; unknown coded enum
        codes arrive here as `value_error` entries
    generic_exception_handler: anything else (500, details only in the log)

Exports:
    register_exception_handlers: Install the three handlers on an app
"""

from collections.abc import Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status code -> (title, type slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    503: ("Service Unavailable", "service-unavailable"),
}
_UNKNOWN_STATUS = ("Error", "error")

# First element of a Pydantic `loc` when it names the request part
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    errors: list[ErrorDetail] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON response for one problem occurrence."""
    title, slug = _HTTP_STATUS_INFO.get(status_code, _UNKNOWN_STATUS)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
        errors=errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple | list) -> str:
    """Dotted field path without the request-part prefix.

    Example:
        >>> _field_name(("body", "items", 0, "course_type"))
        'items.0.course_type'
    """
    parts = list(loc)
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "unknown"


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a Starlette HTTPException as Problem Details.

    Headers set on the exception (e.g. `Allow` on 405) are kept.
    """
    assert isinstance(exc, StarletteHTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request, exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render a RequestValidationError as 422 Problem Details.

    Args:
        request: Incoming request.
        exc: Validation error raised while binding parameters or body.

    Returns:
        JSONResponse: 422 with one `errors[]` entry per failing field.

    Example:
        >>> # GET /api/v1/courses/echo?course_type=999
        >>> # {
        >>> #   "type": "http://localhost:8000/errors/validation-failed",
        >>> #   "title": "Validation Failed",
        >>> #   "status": 422,
        >>> #   "detail": "Request validation failed. Check 'errors' for details.",
        >>> #   "instance": "/api/v1/courses/echo",
        >>> #   "errors": [
        >>> #     {"field": "course_type", "code": "value_error",
        >>> #      "message": "Value error, CourseType has no variant with code 999"}
        >>> #   ],
        >>> #   "trace_id": "..."
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    field_errors = [
        ErrorDetail(
            field=_field_name(error.get("loc", ())),
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Validation failed"),
        )
        for error in exc.errors()
    ]

    get_logger().info(
        "Request validation failed",
        request_path=request.url.path,
        request_method=request.method,
        fields=[detail.field for detail in field_errors],
    )

    return _problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=field_errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and answer 500 without its message."""
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )

    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the Problem Details handlers on `app`.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
