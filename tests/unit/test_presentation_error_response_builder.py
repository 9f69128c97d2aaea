"""Unit tests for ErrorResponseBuilder utility."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from src.core.enums import ErrorCode
from src.core.config import settings
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.domain.enums import CourseType
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _request(path: str, trace_id: str | None = "trace-123") -> MagicMock:
    request = MagicMock()
    request.url.path = path
    request.state.trace_id = trace_id
    return request


def _body(response) -> dict:
    return json.loads(bytes(response.body).decode())


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Unit tests for ErrorResponseBuilder utility class."""

    def test_not_found_error(self):
        """Test NotFoundError maps to 404 Problem Details."""
        # Arrange
        error = NotFoundError(
            code=ErrorCode.ENUM_TYPE_NOT_FOUND,
            message="No coded enum named 'Color' is registered",
            resource_type="CodedEnum",
            resource_id="Color",
        )

        # Act
        response = ErrorResponseBuilder.from_domain_error(
            error, _request("/api/v1/coded-enums/Color")
        )

        # Assert
        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = _body(response)
        assert body["type"] == f"{settings.api_base_url}/errors/enum_type_not_found"
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "No coded enum named 'Color' is registered"
        assert body["instance"] == "/api/v1/coded-enums/Color"
        assert body["trace_id"] == "trace-123"
        assert "errors" not in body

    def test_validation_error_with_field(self):
        """Test ValidationError maps to 400 with a field-level entry."""
        error = ValidationError(
            code=ErrorCode.INVALID_ENUM_CODE,
            message="CourseType code must be an integer, got 'abc'",
            field="course_type",
        )

        response = ErrorResponseBuilder.from_domain_error(error, _request("/x"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = _body(response)
        assert body["title"] == "Validation Failed"
        assert body["errors"] == [
            {
                "field": "course_type",
                "code": "invalid_enum_code",
                "message": "CourseType code must be an integer, got 'abc'",
            }
        ]

    def test_validation_error_without_field(self):
        """Test ValidationError without field has no errors list."""
        error = ValidationError(code=ErrorCode.INVALID_ENUM_CODE, message="bad")

        body = _body(ErrorResponseBuilder.from_domain_error(error, _request("/x")))

        assert "errors" not in body

    def test_parse_failure_maps_to_400(self):
        """Test the ValidationError from CodedEnum.parse becomes a 400."""
        error = CourseType.parse("abc").error

        response = ErrorResponseBuilder.from_domain_error(error, _request("/x"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = _body(response)
        assert body["type"] == f"{settings.api_base_url}/errors/invalid_enum_code"
        assert body["detail"] == "CourseType code must be an integer, got 'abc'"

    def test_base_domain_error_maps_to_500(self):
        """Test unknown DomainError subclasses map to 500."""
        error = DomainError(code=ErrorCode.ENUM_CODE_NOT_FOUND, message="unexpected")

        response = ErrorResponseBuilder.from_domain_error(error, _request("/x"))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert _body(response)["title"] == "Internal Server Error"

    def test_missing_trace_id_omitted(self):
        """Test trace_id is omitted when the request carries none."""
        error = NotFoundError(
            code=ErrorCode.ENUM_CODE_NOT_FOUND,
            message="CourseType has no variant with code 1",
            resource_type="CourseType",
            resource_id="1",
        )

        body = _body(
            ErrorResponseBuilder.from_domain_error(error, _request("/x", trace_id=None))
        )

        assert "trace_id" not in body
