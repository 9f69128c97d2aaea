"""
Main FastAPI application entry point.

Importing `src.domain.enums` registers every coded enum, so the registry is
fully populated before the application object exists and before the server
accepts traffic.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

import src.domain.enums  # noqa: F401  # registers coded enums
from src.core.config import settings
from src.core.container import get_logger
from src.domain.coded_enums import describe, get_registered_coded_enums, get_statistics
from src.presentation.openapi import install_coded_enum_openapi
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: log the coded enum registry contents.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    for entry in get_registered_coded_enums():
        logger.debug(
            "Coded enum registered",
            enum_type=entry.name,
            variants=len(entry),
            description=describe(entry),
        )
    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
        **get_statistics(),
    )

    yield

    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Integer-coded enums for request binding, JSON and OpenAPI",
    version=settings.app_version,
    docs_url=settings.docs_url,
    redoc_url=settings.redoc_url,
    openapi_url=settings.openapi_url,
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)

# Annotate coded enum fields in the generated OpenAPI document
if settings.enum_docs_enabled:
    install_coded_enum_openapi(app)


def run() -> None:
    """Serve the application with uvicorn using host/port from settings."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
