"""Shared schema configuration and error response schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from validation.violations import Violation, ViolationKind


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire.

    Input is accepted in either camelCase or snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ViolationSchema(BaseModel):
    """A single rule a candidate record violated."""

    field: str = Field(
        description="API field name, or 'record' for cross-field rules",
    )
    kind: ViolationKind = Field(
        description="Violated rule",
    )
    message: str = Field(
        description="Human-readable explanation",
    )

    @classmethod
    def from_violation(cls, violation: Violation) -> "ViolationSchema":
        return cls(field=violation.field, kind=violation.kind, message=violation.message)


class RejectionResponse(BaseModel):
    """Response body for a rejected create, update or delete."""

    detail: str = Field(
        description="Error message",
    )
    violations: list[ViolationSchema] = Field(
        description="Every violation found, one entry per rule",
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(
        description="Error message",
    )
