"""Course echo endpoints.

Echo the course type they receive, once per binding style:

    GET  /courses/echo?course_type=103   query parameter
    POST /courses/echo                   JSON body {"course_type": 103}
    PUT  /courses/echo?course_type=103   query parameter model

Unknown codes never reach the handlers: CourseType validation rejects them
and the validation exception handler answers 422.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.domain.enums import CourseType
from src.domain.types import Int64String
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.course_schemas import (
    CourseEchoQuery,
    CourseEchoRequest,
    CourseEchoResponse,
)

courses_router = APIRouter(
    prefix="/courses",
    tags=["Courses"],
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ProblemDetails}},
)


@courses_router.get(
    "/echo",
    response_model=CourseEchoResponse,
    summary="Echo course type from query parameter",
)
async def echo_course_type(
    course_type: Annotated[CourseType, Query(description="Course type")],
    course_id: Annotated[
        Int64String | None, Query(description="Course identifier")
    ] = None,
) -> CourseEchoResponse:
    """Bind a course type from the query string and echo it.

    Args:
        course_type: Course type code, e.g. `?course_type=103`.
        course_id: Optional course identifier.

    Returns:
        CourseEchoResponse: The bound values.
    """
    return CourseEchoResponse(course_type=course_type, course_id=course_id)


@courses_router.post(
    "/echo",
    response_model=CourseEchoResponse,
    summary="Echo course type from JSON body",
)
async def echo_course_type_body(body: CourseEchoRequest) -> CourseEchoResponse:
    """Bind a course type from a JSON body and echo it.

    Args:
        body: Body with `course_type` as a bare integer code.

    Returns:
        CourseEchoResponse: The bound values.
    """
    return CourseEchoResponse(
        course_type=body.course_type, course_id=body.course_id
    )


@courses_router.put(
    "/echo",
    response_model=CourseEchoResponse,
    summary="Echo course type from query parameter model",
)
async def echo_course_type_query_model(
    query: Annotated[CourseEchoQuery, Query()],
) -> CourseEchoResponse:
    """Bind a query parameter model and echo it.

    Args:
        query: Query parameters parsed into CourseEchoQuery.

    Returns:
        CourseEchoResponse: The bound values.
    """
    return CourseEchoResponse(course_type=query.course_type, title=query.title)
