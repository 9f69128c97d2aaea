"""Coded enum errors.

Two kinds of failure exist:

- Lookup misses (unknown code, unknown enum name) are ordinary outcomes.
  They travel as `Failure(NotFoundError(...))` values built from the message
  templates in `CodedEnumError`.
- Definition defects (duplicate codes, validating an enum that was never
  registered) are programming errors. They are raised as exceptions so the
  process refuses to start or the offending code path fails loudly.

Usage:
    from src.domain.errors import CodedEnumError, DuplicateCodeError

    message = CodedEnumError.CODE_NOT_FOUND.format(enum_type="CourseType", code=999)
"""


class CodedEnumError:
    """Coded enum error message templates.

    Used to build the `message` of errors returned in Result types.
    Placeholders are filled with str.format().
    """

    CODE_NOT_FOUND = "{enum_type} has no variant with code {code}"
    """Requested code is not among the enum's variants."""

    INVALID_CODE = "{enum_type} code must be an integer, got {value!r}"
    """Input could not be interpreted as an integer code."""

    TYPE_NOT_FOUND = "No coded enum named {name!r} is registered"
    """Catalog lookup by name missed."""


class DuplicateCodeError(ValueError):
    """Raised when two variants of one coded enum share a code."""

    def __init__(
        self, enum_type: str, code: int, first_label: str, second_label: str
    ) -> None:
        """Initialize duplicate code error.

        Args:
            enum_type: Name of the enum type being registered.
            code: The code declared more than once.
            first_label: Label of the earlier variant.
            second_label: Label of the later variant.
        """
        super().__init__(
            f"{enum_type} declares code {code} twice "
            f"({first_label!r} and {second_label!r})"
        )
        self.enum_type = enum_type
        self.code = code
        self.first_label = first_label
        self.second_label = second_label


class UnregisteredCodedEnumError(LookupError):
    """Raised when a CodedEnum subclass is used before being registered."""

    def __init__(self, enum_type: str) -> None:
        """Initialize unregistered enum error.

        Args:
            enum_type: Name of the enum class missing from the registry.
        """
        super().__init__(
            f"{enum_type} is not registered; decorate it with @coded_enum"
        )
        self.enum_type = enum_type
