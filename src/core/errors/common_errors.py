"""Common error classes shared by the registry and the API layer.

Error Types:
- ValidationError: Input that cannot be interpreted (e.g. non-numeric code)
- NotFoundError: Lookup miss (unknown enum code, unknown enum type)

Duplicate codes are not a Result outcome: they are definition defects and
raise DuplicateCodeError at registration.

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(NotFoundError(
        code=ErrorCode.ENUM_CODE_NOT_FOUND,
        message="CourseType has no variant with code 999",
        resource_type="CourseType",
        resource_id="999",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (enum type name, "CodedEnum", ...).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str

