"""Course echo request and response schemas.

Pydantic schemas for the sample course endpoints. Each carries a
`CourseType` field, so they exercise every coded enum path:
- query/body binding from the integer code
- serialization back to the bare code
- OpenAPI description and allow-list
"""

from pydantic import BaseModel, Field

from src.domain.enums import CourseType
from src.domain.types import Int64String


# =============================================================================
# Request Schemas
# =============================================================================


class CourseEchoRequest(BaseModel):
    """JSON body for POST /courses/echo.

    Attributes:
        course_type: Course type code.
        course_id: Optional course identifier (string or integer).
    """

    course_type: CourseType = Field(
        ..., description="Course type", examples=[103]
    )
    course_id: Int64String | None = Field(
        None, description="Course identifier", examples=["9007199254740993"]
    )


class CourseEchoQuery(BaseModel):
    """Query parameters for PUT /courses/echo.

    Attributes:
        course_type: Course type code.
        title: Optional course title.
    """

    course_type: CourseType = Field(..., description="Course type")
    title: str | None = Field(None, description="Course title", max_length=200)


# =============================================================================
# Response Schemas
# =============================================================================


class CourseEchoResponse(BaseModel):
    """Echo of the bound course type.

    Attributes:
        course_type: Course type, serialized as its integer code.
        course_id: Course identifier, serialized as a string.
        title: Course title, when supplied.
    """

    course_type: CourseType = Field(
        ..., description="Course type", examples=[103]
    )
    course_id: Int64String | None = Field(None, description="Course identifier")
    title: str | None = Field(None, description="Course title")
