"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, error responses and the OpenAPI
post-processing for coded enums. It is thin: request binding and
serialization of coded enums happen in the domain types' Pydantic hooks,
and endpoints only read the registry.

Structure:
- routers/: System routes and API v1 resources
- openapi/: Coded enum OpenAPI annotations
"""
