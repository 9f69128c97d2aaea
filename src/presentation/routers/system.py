"""System router for non-versioned application endpoints.

Endpoints:
    GET /         - Service identity and documentation links
    GET /health   - Liveness plus coded enum registry readiness
    GET /config   - Effective settings (development only)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.domain.coded_enums import get_statistics

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str | None]:
    """Identify the service and point at its documentation."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": settings.docs_url,
        "openapi": settings.openapi_url,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Report whether the coded enum registry was populated at startup.

    An empty registry means no enum module was imported, so every coded
    enum field would fail validation; the service reports 503 in that case.

    Returns:
        JSONResponse: 200 with registry counts, or 503 when empty.
    """
    stats = get_statistics()
    if stats["total_types"] == 0:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "coded_enums": stats},
        )
    return JSONResponse(content={"status": "healthy", "coded_enums": stats})


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Expose effective settings while developing.

    Returns:
        JSONResponse: Settings snapshot, or 403 outside development.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "log_level": settings.log_level,
            "api_base_url": settings.api_base_url,
            "api_v1_prefix": settings.api_v1_prefix,
            "openapi_url": settings.openapi_url,
            "enum_docs_enabled": settings.enum_docs_enabled,
        }
    )
