"""Domain value objects.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.coded_enum_value import CodedEnumValue

__all__ = [
    "CodedEnumValue",
]
