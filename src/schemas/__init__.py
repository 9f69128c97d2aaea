"""Request and response schemas for the API.

Pydantic models used by the presentation layer routers.
"""
