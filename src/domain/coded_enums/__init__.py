"""Coded enums: integer-coded, labelled enum types.

Usage:
    from src.domain.coded_enums import CodedEnum, coded_enum

    @coded_enum
    class CourseType(CodedEnum):
        PICTURE = 102, "PICTURE"
"""

from src.domain.coded_enums.coded_enum import (
    CODED_ENUM_SCHEMA_MARKER,
    CodedEnum,
    coded_enum,
)
from src.domain.coded_enums.registry import (
    CodedEnumType,
    allowed_codes,
    describe,
    find_coded_enum_type,
    get_coded_enum_type,
    get_coded_enum_type_by_name,
    get_registered_coded_enums,
    get_statistics,
    register,
    register_coded_enum,
    resolve,
)

__all__ = [
    "CODED_ENUM_SCHEMA_MARKER",
    "CodedEnum",
    "CodedEnumType",
    "allowed_codes",
    "coded_enum",
    "describe",
    "find_coded_enum_type",
    "get_coded_enum_type",
    "get_coded_enum_type_by_name",
    "get_registered_coded_enums",
    "get_statistics",
    "register",
    "register_coded_enum",
    "resolve",
]
