"""CodedValue protocol - what the registry needs from a variant.

A variant of a coded enum is anything exposing an integer wire `code` and a
human-readable `label`. Both the `CodedEnumValue` value object and members of
`CodedEnum` subclasses satisfy it structurally (PEP 544), so the registry
never has to look fields up by name.
"""

from typing import Protocol


class CodedValue(Protocol):
    """A single variant of a coded enum.

    Attributes:
        code: Stable integer identifier used on the wire.
        label: Human-readable description shown in documentation.
    """

    @property
    def code(self) -> int: ...

    @property
    def label(self) -> str: ...
