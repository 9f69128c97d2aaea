"""Error response builder for RFC 7807 Problem Details.

Converts domain errors returned inside `Failure(...)` into RFC 7807 JSON
responses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = NotFoundError(
        ...     code=ErrorCode.ENUM_TYPE_NOT_FOUND,
        ...     message="No coded enum named 'Color' is registered",
        ...     resource_type="CodedEnum",
        ...     resource_id="Color",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(error, request)
        >>> # Returns 404 with ProblemDetails JSON
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Domain error to convert
            request: FastAPI Request object (for instance URL and trace ID)

        Returns:
            JSONResponse with RFC 7807 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=getattr(request.state, "trace_id", None),
        )

        # Field-level detail for validation failures
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _get_status_code(error: DomainError) -> int:
        """Map a domain error class to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(not_found_error)
            404
        """
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        if isinstance(error, ValidationError):
            return status.HTTP_400_BAD_REQUEST
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def _get_title(error: DomainError) -> str:
        """Get human-readable title for a domain error class."""
        if isinstance(error, NotFoundError):
            return "Resource Not Found"
        if isinstance(error, ValidationError):
            return "Validation Failed"
        return "Internal Server Error"
