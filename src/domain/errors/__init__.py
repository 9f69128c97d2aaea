"""Domain errors package.

Usage:
    from src.domain.errors import CodedEnumError, DuplicateCodeError
"""

from src.domain.errors.coded_enum_error import (
    CodedEnumError,
    DuplicateCodeError,
    UnregisteredCodedEnumError,
)

__all__ = [
    "CodedEnumError",
    "DuplicateCodeError",
    "UnregisteredCodedEnumError",
]
