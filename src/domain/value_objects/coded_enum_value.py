"""CodedEnumValue value object.

Plain (code, label) pair for coded enums that are not declared as Python
`Enum` classes, e.g. code tables loaded from configuration. Enum-backed
types use their members directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodedEnumValue:
    """One variant of a coded enum.

    Attributes:
        code: Integer wire code, unique within its enum type.
        label: Human-readable label (not required to be unique).

    Example:
        >>> picture = CodedEnumValue(102, "PICTURE")
        >>> f"{picture.code}:{picture.label}"
        '102:PICTURE'
    """

    code: int
    label: str
