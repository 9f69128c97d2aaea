"""Annotated types with centralized validation and wire formatting.

Define the wire contract once, use everywhere.

Usage:
    from src.domain.types import Int64String

    class CourseEchoResponse(BaseModel):
        id: Int64String  # int in Python, "9007199254740993" on the wire
"""

from typing import Annotated

from pydantic import Field, PlainSerializer, WithJsonSchema

# ============================================================================
# Identifier Types
# ============================================================================

Int64String = Annotated[
    int,
    Field(ge=-(2**63), le=2**63 - 1),
    PlainSerializer(str, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "int64", "pattern": r"^-?\d+$"}),
]
"""64-bit integer transmitted as a JSON string.

JavaScript clients lose precision above 2**53, so large identifiers are
written as decimal strings. Input accepts either an integer or a decimal
string; the OpenAPI document shows the field as `type: string`.

Examples:
    >>> from pydantic import BaseModel
    >>> class Item(BaseModel):
    ...     id: Int64String
    >>> Item(id="9007199254740993").model_dump(mode="json")
    {'id': '9007199254740993'}
    >>> Item(id=42).id
    42
"""
