"""Coded Enum Registry - single source of truth for coded enum metadata.

A coded enum is a closed set of variants, each carrying a stable integer wire
code and a human-readable label (e.g. course types `102:PICTURE`,
`103:AUDIO`). This module turns such a set into an immutable `CodedEnumType`
and derives the two views the API layer needs:

    - describe(): "102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL"
    - allowed_codes(): ["102", "103", "104", "105"]

Registry Structure:
    - CodedEnumType: frozen entry with ordered variants and code lookup
    - register(): build an entry, rejecting duplicate codes
    - register_coded_enum(): publish an Enum class in the process-wide table
    - Helper Functions: resolve, describe, allowed_codes, queries, statistics

Lifecycle:
    Entries are built once, at import time, by the `@coded_enum` decorator
    and never mutated afterwards. Each entry is published with a single dict
    assignment after it is fully constructed, so request handlers can read
    the table from any thread without locking.

Usage:
    from src.domain.coded_enums.registry import describe, register, resolve
    from src.domain.value_objects import CodedEnumValue

    levels = register(
        [CodedEnumValue(1, "Beginner"), CodedEnumValue(2, "Advanced")],
        name="CourseLevel",
    )
    describe(levels)          # "1:Beginner; 2:Advanced"
    resolve(levels, 3)        # Failure(NotFoundError(...))
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import CodedEnumError, DuplicateCodeError
from src.domain.protocols import CodedValue

V = TypeVar("V", bound=CodedValue)


@dataclass(frozen=True, slots=True, kw_only=True)
class CodedEnumType(Generic[V]):
    """Registry entry for one coded enum type.

    Build instances with `register()`; it enforces the unique-code invariant.

    Attributes:
        name: Display name of the enum type. Used in OpenAPI markers,
            catalog URLs and error messages.
        variants: Variants in declaration order.
        lookup: Read-only mapping from code to variant. Keys are exactly
            the codes present in `variants`.
    """

    name: str
    variants: tuple[V, ...]
    lookup: Mapping[int, V]

    def __len__(self) -> int:
        """Number of variants."""
        return len(self.variants)


# =============================================================================
# Construction
# =============================================================================


def register(variants: Iterable[V], *, name: str) -> CodedEnumType[V]:
    """Build an immutable coded enum type from its variants.

    Args:
        variants: Variants in declaration order.
        name: Display name of the enum type.

    Returns:
        CodedEnumType wrapping the variants and their code lookup.

    Raises:
        DuplicateCodeError: If two variants share a code. Nothing is
            returned in that case.

    Example:
        >>> register([CodedEnumValue(1, "A"), CodedEnumValue(1, "B")], name="X")
        DuplicateCodeError: X declares code 1 twice ('A' and 'B')
    """
    ordered = tuple(variants)
    lookup: dict[int, V] = {}
    for variant in ordered:
        existing = lookup.get(variant.code)
        if existing is not None:
            raise DuplicateCodeError(name, variant.code, existing.label, variant.label)
        lookup[variant.code] = variant

    return CodedEnumType(
        name=name,
        variants=ordered,
        lookup=MappingProxyType(lookup),
    )


# =============================================================================
# Queries on a single entry
# =============================================================================


def resolve(enum_type: CodedEnumType[V], code: int) -> Result[V, NotFoundError]:
    """Look up the variant with the given code.

    Args:
        enum_type: Registered coded enum type.
        code: Integer wire code.

    Returns:
        Success(variant) if the code exists, otherwise
        Failure(NotFoundError) with ErrorCode.ENUM_CODE_NOT_FOUND. A bool is
        never a code, even though True == 1.

    Example:
        >>> match resolve(course_types, 103):
        ...     case Success(value=variant):
        ...         variant.label
        'AUDIO'
    """
    variant = None if isinstance(code, bool) else enum_type.lookup.get(code)
    if variant is None:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.ENUM_CODE_NOT_FOUND,
                message=CodedEnumError.CODE_NOT_FOUND.format(
                    enum_type=enum_type.name, code=code
                ),
                resource_type=enum_type.name,
                resource_id=str(code),
                details={"allowed_codes": ", ".join(allowed_codes(enum_type))},
            )
        )
    return Success(value=variant)


def describe(enum_type: CodedEnumType[V]) -> str:
    """Join the variants as "code:label" pairs in declaration order.

    Args:
        enum_type: Registered coded enum type.

    Returns:
        e.g. "102:PICTURE; 103:AUDIO". Empty string if there are no variants.
    """
    return "; ".join(f"{variant.code}:{variant.label}" for variant in enum_type.variants)


def allowed_codes(enum_type: CodedEnumType[V]) -> list[str]:
    """Get the legal codes as decimal strings, in declaration order.

    Args:
        enum_type: Registered coded enum type.

    Returns:
        e.g. ["102", "103", "104", "105"].
    """
    return [str(variant.code) for variant in enum_type.variants]


# =============================================================================
# Process-wide table (keyed by Enum class identity)
# =============================================================================

_CODED_ENUM_REGISTRY: dict[type[Enum], CodedEnumType] = {}


def register_coded_enum(enum_cls: type[Enum]) -> CodedEnumType:
    """Publish an Enum class in the process-wide registry.

    Members are read from `__members__`, which includes aliases, so a code
    declared twice is rejected even when Python would silently alias it.
    Registering the same class again returns the entry published first.

    Args:
        enum_cls: Enum class whose members expose `code` and `label`.

    Returns:
        The published CodedEnumType.

    Raises:
        DuplicateCodeError: If two members share a code.
        ValueError: If a different class with the same name is registered.
    """
    existing = _CODED_ENUM_REGISTRY.get(enum_cls)
    if existing is not None:
        return existing

    name = enum_cls.__name__
    if get_coded_enum_type_by_name(name) is not None:
        raise ValueError(f"A different coded enum named {name!r} is already registered")

    entry = register(enum_cls.__members__.values(), name=name)
    _CODED_ENUM_REGISTRY[enum_cls] = entry
    return entry


def get_coded_enum_type(enum_cls: type[Enum]) -> CodedEnumType | None:
    """Get the registry entry for an Enum class.

    Args:
        enum_cls: Enum class.

    Returns:
        CodedEnumType if registered, None otherwise.
    """
    return _CODED_ENUM_REGISTRY.get(enum_cls)


def get_coded_enum_type_by_name(name: str) -> CodedEnumType | None:
    """Get a registry entry by its display name.

    Args:
        name: Enum type name (e.g., "CourseType").

    Returns:
        CodedEnumType if found, None otherwise.
    """
    return next(
        (entry for entry in _CODED_ENUM_REGISTRY.values() if entry.name == name),
        None,
    )


def find_coded_enum_type(name: str) -> Result[CodedEnumType, NotFoundError]:
    """Look up a registry entry by name, reporting a miss as a Failure.

    Args:
        name: Enum type name (e.g., "CourseType").

    Returns:
        Success(entry) or Failure(NotFoundError) with
        ErrorCode.ENUM_TYPE_NOT_FOUND.
    """
    entry = get_coded_enum_type_by_name(name)
    if entry is None:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.ENUM_TYPE_NOT_FOUND,
                message=CodedEnumError.TYPE_NOT_FOUND.format(name=name),
                resource_type="CodedEnum",
                resource_id=name,
            )
        )
    return Success(value=entry)


def get_registered_coded_enums() -> list[CodedEnumType]:
    """Get all registry entries in registration order."""
    return list(_CODED_ENUM_REGISTRY.values())


def get_statistics() -> dict[str, int]:
    """Get coded enum registry statistics.

    Returns:
        Dictionary with:
            - total_types: Number of registered coded enum types
            - total_variants: Number of variants across all types

    Example:
        >>> get_statistics()
        {'total_types': 1, 'total_variants': 4}
    """
    entries = get_registered_coded_enums()
    return {
        "total_types": len(entries),
        "total_variants": sum(len(entry) for entry in entries),
    }
