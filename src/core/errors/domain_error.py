"""DomainError: base for errors returned inside `Failure(...)`.

A DomainError is a value, not an exception. A lookup miss such as an
unknown enum code is an expected outcome; the caller inspects the Failure
and picks the HTTP status or validation message.

Subclass it as a frozen, slotted, keyword-only dataclass:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class NotFoundError(DomainError):
        resource_type: str
        resource_id: str
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (not an Exception).

    Attributes:
        code: Machine-readable error code; its value ends the Problem
            Details `type` URI.
        message: Human-readable message, used as Problem Details `detail`.
        details: Extra string context (e.g. the allowed codes of an enum).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
