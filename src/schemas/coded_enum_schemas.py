"""Coded enum catalog response schemas.

Pydantic schemas for the read-only coded enum catalog endpoints.
Includes registry-entry-to-schema conversion methods.
"""

from pydantic import BaseModel, Field

from src.domain.coded_enums import CodedEnumType, allowed_codes, describe


# =============================================================================
# Response Schemas
# =============================================================================


class CodedEnumVariantResponse(BaseModel):
    """One variant of a coded enum.

    Attributes:
        code: Integer wire code.
        label: Human-readable label.
    """

    code: int = Field(..., description="Integer wire code", examples=[103])
    label: str = Field(..., description="Human-readable label", examples=["AUDIO"])


class CodedEnumResponse(BaseModel):
    """Single coded enum type.

    Attributes:
        name: Enum type name.
        description: "code:label" pairs joined with "; ".
        allowed_codes: Legal codes as decimal strings, in declaration order.
        variants: Variants in declaration order.
    """

    name: str = Field(..., description="Enum type name", examples=["CourseType"])
    description: str = Field(
        ...,
        description="Joined code:label description",
        examples=["102:PICTURE; 103:AUDIO; 104:VIDEO; 105:URL"],
    )
    allowed_codes: list[str] = Field(
        ...,
        description="Legal codes as decimal strings",
        examples=[["102", "103", "104", "105"]],
    )
    variants: list[CodedEnumVariantResponse] = Field(
        ..., description="Variants in declaration order"
    )

    @classmethod
    def from_coded_type(cls, entry: CodedEnumType) -> "CodedEnumResponse":
        """Convert a registry entry to response schema.

        Args:
            entry: Registered coded enum type.

        Returns:
            CodedEnumResponse: Response schema.
        """
        return cls(
            name=entry.name,
            description=describe(entry),
            allowed_codes=allowed_codes(entry),
            variants=[
                CodedEnumVariantResponse(code=variant.code, label=variant.label)
                for variant in entry.variants
            ],
        )


class CodedEnumListResponse(BaseModel):
    """Coded enum catalog response.

    Attributes:
        coded_enums: Registered coded enum types, in registration order.
        total_count: Number of registered types.
    """

    coded_enums: list[CodedEnumResponse] = Field(
        ..., description="Registered coded enum types"
    )
    total_count: int = Field(..., description="Number of registered types")

    @classmethod
    def from_coded_types(cls, entries: list[CodedEnumType]) -> "CodedEnumListResponse":
        """Convert registry entries to list response schema."""
        return cls(
            coded_enums=[CodedEnumResponse.from_coded_type(entry) for entry in entries],
            total_count=len(entries),
        )
