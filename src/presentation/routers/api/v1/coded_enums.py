"""Coded enum catalog endpoints.

Read-only view of the coded enum registry, for clients that build
drop-downs or validate input before calling the API.

Endpoints:
    GET /coded-enums         - List all registered coded enums
    GET /coded-enums/{name}  - Get one coded enum by type name
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.core.result import Failure, Success
from src.domain.coded_enums import find_coded_enum_type, get_registered_coded_enums
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.coded_enum_schemas import CodedEnumListResponse, CodedEnumResponse

coded_enums_router = APIRouter(prefix="/coded-enums", tags=["Coded Enums"])


@coded_enums_router.get(
    "",
    response_model=CodedEnumListResponse,
    summary="List coded enums",
)
async def list_coded_enums() -> CodedEnumListResponse:
    """List every registered coded enum with its description and allow-list.

    Returns:
        CodedEnumListResponse: Registered types in registration order.
    """
    return CodedEnumListResponse.from_coded_types(get_registered_coded_enums())


@coded_enums_router.get(
    "/{name}",
    response_model=CodedEnumResponse,
    summary="Get coded enum",
    responses={status.HTTP_404_NOT_FOUND: {"model": ProblemDetails}},
)
async def get_coded_enum(
    request: Request, name: str
) -> CodedEnumResponse | JSONResponse:
    """Get one coded enum by type name.

    Args:
        request: FastAPI request object.
        name: Enum type name (e.g., "CourseType").

    Returns:
        CodedEnumResponse on success, 404 Problem Details otherwise.
    """
    match find_coded_enum_type(name):
        case Success(value=entry):
            return CodedEnumResponse.from_coded_type(entry)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
