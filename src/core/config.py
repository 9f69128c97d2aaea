"""
Configuration management using Pydantic Settings.

Type-safe configuration loaded from environment variables. Every field has a
default, so the service starts with an empty environment; deployments
override only what differs (e.g. ENVIRONMENT=production, LOG_LEVEL=WARNING).

Usage:
    from src.core.config import settings

    prefix = settings.api_v1_prefix

    if settings.is_development:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables (case-insensitive)
        2. Field defaults
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects log rendering and /config access",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(
        default="INFO",
        description="Lowest emitted log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Server (used by `run()` in src.main)
    host: str = Field(default="0.0.0.0", description="Server bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server bind port")
    reload: bool = Field(default=False, description="Auto-reload on code changes")

    # API
    app_name: str = Field(default="Coded Enums API", description="OpenAPI title")
    app_version: str = Field(default="0.1.0", description="OpenAPI version")
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL; prefixes Problem Details `type` URIs",
    )
    api_v1_prefix: str = Field(default="/api/v1", description="API v1 route prefix")

    # Documentation
    docs_url: str | None = Field(default="/docs", description="Swagger UI path")
    redoc_url: str | None = Field(default="/redoc", description="ReDoc path")
    openapi_url: str = Field(default="/openapi.json", description="OpenAPI path")
    enum_docs_enabled: bool = Field(
        default=True,
        description="Append code:label descriptions and allow-lists to coded "
        "enum fields in the OpenAPI document",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Upper-case the level name and reject unknown levels.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes so `{api_base_url}/errors/...` stays clean."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance (loaded once per process).

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
