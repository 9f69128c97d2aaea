"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming and echoed as the
`code` of RFC 7807 field errors.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_ENUM_CODE = "invalid_enum_code"

    # Resource errors
    ENUM_CODE_NOT_FOUND = "enum_code_not_found"
    ENUM_TYPE_NOT_FOUND = "enum_type_not_found"
