"""Pydantic schemas for staff requests and responses."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from schemas.common import CamelModel

# Decimals are sent as JSON numbers rather than strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class StaffCandidate(CamelModel):
    """Staff member as submitted by a caller for create or update."""

    id: int | None = Field(
        default=None,
        description="Ignored on create; must match the path id on update",
    )
    name: str | None = Field(
        default=None,
        description="Full name, 10 to 250 characters",
    )
    email: str | None = Field(
        default=None,
        description="Optional email address",
    )
    phone: str | None = Field(
        default=None,
        description="Optional phone number",
    )
    hourly_salary: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Optional hourly salary between 30 and 400, at most two decimals",
    )


class StaffRead(CamelModel):
    """A stored staff member."""

    id: int
    name: str
    email: str | None = None
    phone: str | None = None
    hourly_salary: Money | None = None
