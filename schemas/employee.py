"""Pydantic schemas for employee requests and responses."""

from datetime import date

from pydantic import Field

from schemas.common import CamelModel


class EmployeeCandidate(CamelModel):
    """Employee as submitted by a caller for create or update.

    Every field is optional here; presence and bounds are checked by the
    employee validator so that all problems are reported together.
    """

    id: int | None = Field(
        default=None,
        description="Ignored on create; must match the path id on update",
    )
    name: str | None = Field(
        default=None,
        description="Full name, 10 to 250 characters",
    )
    date_of_birth: date | None = Field(
        default=None,
        description="Date of birth; the employee must be at most 65 years old",
    )
    email: str | None = Field(
        default=None,
        description="Optional email address",
    )
    phone: str | None = Field(
        default=None,
        description="Optional phone number",
    )
    hourly_salary: float | None = Field(
        default=None,
        description="Hourly salary between 50 and 400; at least 200 from age 30",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Jane Alexandra Doe",
                "dateOfBirth": "1990-04-12",
                "email": "jane.doe@acme.io",
                "phone": "+1 (555) 123-4567",
                "hourlySalary": 220.0,
            }
        }
    }


class EmployeeRead(CamelModel):
    """A stored employee."""

    id: int
    name: str
    date_of_birth: date
    email: str | None = None
    phone: str | None = None
    hourly_salary: float
