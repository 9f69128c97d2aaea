"""Unit tests for RFC 7807 Problem Details schemas."""

import pytest
from pydantic import ValidationError

from src.presentation.routers.api.v1.errors import ErrorDetail, ProblemDetails


@pytest.mark.unit
class TestProblemDetails:
    """Test ProblemDetails and ErrorDetail models."""

    def test_minimal_problem(self):
        problem = ProblemDetails(
            type="http://localhost:8000/errors/enum_type_not_found",
            title="Resource Not Found",
            status=404,
            detail="No coded enum named 'Color' is registered",
            instance="/api/v1/coded-enums/Color",
        )

        assert problem.errors is None
        assert problem.trace_id is None

    def test_exclude_none_drops_optional_fields(self):
        problem = ProblemDetails(
            type="t", title="Validation Failed", status=422, detail="d", instance="/i"
        )

        assert problem.model_dump(exclude_none=True) == {
            "type": "t",
            "title": "Validation Failed",
            "status": 422,
            "detail": "d",
            "instance": "/i",
        }

    def test_with_field_errors(self):
        problem = ProblemDetails(
            type="t",
            title="Validation Failed",
            status=422,
            detail="d",
            instance="/api/v1/courses/echo",
            errors=[
                ErrorDetail(
                    field="course_type",
                    code="value_error",
                    message="Value error, CourseType has no variant with code 999",
                )
            ],
            trace_id="abc",
        )

        dumped = problem.model_dump()
        assert dumped["errors"][0]["field"] == "course_type"
        assert dumped["trace_id"] == "abc"

    def test_required_fields(self):
        with pytest.raises(ValidationError):
            ProblemDetails(type="t", title="x", status=400)  # type: ignore[call-arg]
