"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns.

Resources:
    /api/v1/coded-enums   - Coded enum catalog (read-only)
    /api/v1/courses       - Course echo endpoints (coded enum binding)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.coded_enums import coded_enums_router
from src.presentation.routers.api.v1.courses import courses_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(coded_enums_router)
v1_router.include_router(courses_router)

__all__ = [
    "v1_router",
]
