"""CodedEnum base class and @coded_enum registration decorator.

Declare a coded enum as a regular Python Enum whose member values are
`(code, label)` pairs, then register it:

    @coded_enum
    class CourseType(CodedEnum):
        PICTURE = 102, "PICTURE"
        AUDIO = 103, "AUDIO"

Registered subclasses plug into Pydantic (and therefore FastAPI):

    - Validation: accepts a member, an int, or a decimal string such as the
      "103" of a query parameter. Unknown codes raise ValueError, which
      Pydantic reports as a field validation error.
    - Serialization: a member dumps to its bare integer code.
    - JSON schema: {"type": "integer", "enum": [...], "x-coded-enum": name}.
      The `x-coded-enum` marker lets the OpenAPI post-processor find the
      field and append the "code:label" description.
"""

from enum import Enum
from typing import Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.coded_enums.registry import (
    CodedEnumType,
    allowed_codes,
    describe,
    get_coded_enum_type,
    register_coded_enum,
    resolve,
)
from src.domain.errors import CodedEnumError, UnregisteredCodedEnumError

CODED_ENUM_SCHEMA_MARKER = "x-coded-enum"


def _coerce_code(value: Any) -> int | None:
    """Interpret raw input as an integer code, or None if impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class CodedEnum(Enum):
    """Base class for enums whose members carry an integer code and a label.

    Attributes:
        code: Integer wire code of the member.
        label: Human-readable label of the member.

    Example:
        >>> CourseType.AUDIO.code
        103
        >>> CourseType.describe()
        '102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL'
    """

    def __init__(self, code: int, label: str) -> None:
        self.code = code
        self.label = label

    # -------------------------------------------------------------------------
    # Registry access
    # -------------------------------------------------------------------------

    @classmethod
    def coded_type(cls) -> CodedEnumType[Self]:
        """Get this class's registry entry.

        Raises:
            UnregisteredCodedEnumError: If the class was never decorated
                with @coded_enum.
        """
        entry = get_coded_enum_type(cls)
        if entry is None:
            raise UnregisteredCodedEnumError(cls.__name__)
        return entry

    @classmethod
    def from_code(cls, code: int) -> Result[Self, NotFoundError]:
        """Resolve a code to a member.

        Returns:
            Success(member) or Failure(NotFoundError).
        """
        return resolve(cls.coded_type(), code)

    @classmethod
    def parse(cls, value: Any) -> Result[Self, ValidationError | NotFoundError]:
        """Interpret raw input (member, int or decimal string) as a member.

        Returns:
            Success(member); Failure(ValidationError) with
            ErrorCode.INVALID_ENUM_CODE if `value` is not an integer code;
            Failure(NotFoundError) if it is a code no member carries.
        """
        if isinstance(value, cls):
            return Success(value=value)

        code = _coerce_code(value)
        if code is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ENUM_CODE,
                    message=CodedEnumError.INVALID_CODE.format(
                        enum_type=cls.__name__, value=value
                    ),
                )
            )
        return cls.from_code(code)

    @classmethod
    def describe(cls) -> str:
        """Get the "code:label; ..." description of all members."""
        return describe(cls.coded_type())

    @classmethod
    def allowed_codes(cls) -> list[str]:
        """Get all member codes as decimal strings, in declaration order."""
        return allowed_codes(cls.coded_type())

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> Self:
        match cls.parse(value):
            case Success(value=member):
                return member
            case Failure(error=error):
                raise ValueError(error.message)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.code,
                return_schema=core_schema.int_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        entry = cls.coded_type()
        return {
            "type": "integer",
            "enum": [int(code) for code in allowed_codes(entry)],
            CODED_ENUM_SCHEMA_MARKER: entry.name,
        }


def coded_enum[E: CodedEnum](enum_cls: type[E]) -> type[E]:
    """Class decorator registering a CodedEnum subclass at import time.

    Raises:
        DuplicateCodeError: If two members share a code.
    """
    register_coded_enum(enum_cls)
    return enum_cls
