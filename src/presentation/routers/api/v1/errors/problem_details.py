"""RFC 7807 Problem Details response models.

Every error leaving the API, whether an unknown coded enum code (422), an
unknown catalog entry (404) or an unhandled exception (500), has this shape.

RFC 7807: https://tools.ietf.org/html/rfc7807
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """One failing field of a rejected request.

    Attributes:
        field: Dotted field path, e.g. "course_type" or "items.0.course_type".
        code: Pydantic error type (e.g. "value_error", "missing") or domain
            error code.
        message: Human-readable message.
    """

    field: str = Field(..., description="Dotted path of the failing field")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 problem document.

    `errors` is only present for validation failures and `trace_id` only
    when TraceMiddleware ran; both are dropped from the JSON when None.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "http://localhost:8000/errors/validation-failed",
                    "title": "Validation Failed",
                    "status": 422,
                    "detail": "Request validation failed. Check 'errors' for details.",
                    "instance": "/api/v1/courses/echo",
                    "errors": [
                        {
                            "field": "course_type",
                            "code": "value_error",
                            "message": "Value error, CourseType has no variant with code 999",
                        }
                    ],
                    "trace_id": "0b7e6f0e-8f7c-4c9e-9d3a-2f1c5e4b8a11",
                },
                {
                    "type": "http://localhost:8000/errors/enum_type_not_found",
                    "title": "Resource Not Found",
                    "status": 404,
                    "detail": "No coded enum named 'Color' is registered",
                    "instance": "/api/v1/coded-enums/Color",
                },
            ]
        }
    )

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Explanation of this occurrence")
    instance: str = Field(..., description="Request path of this occurrence")
    errors: list[ErrorDetail] | None = Field(
        None, description="Field-level errors (validation failures only)"
    )
    trace_id: str | None = Field(None, description="Request trace ID")
