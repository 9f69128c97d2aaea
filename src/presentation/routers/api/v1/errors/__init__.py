"""Error responses for the v1 API.

Exports:
    ErrorDetail: One failing field
    ProblemDetails: RFC 7807 response body
    ErrorResponseBuilder: DomainError -> Problem Details response
    register_exception_handlers: Install the global exception handlers
"""

from src.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
