"""Structured validation outcomes shared by rules, services and routers."""

from dataclasses import dataclass
from enum import Enum

# Field name used by violations that concern the record as a whole.
RECORD_FIELD = "record"


class ViolationKind(str, Enum):
    """Reasons a candidate record can be rejected."""

    MISSING_FIELD = "MissingField"
    INVALID_LENGTH = "InvalidLength"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_BIRTH_DATE = "InvalidBirthDate"
    SALARY_BELOW_MINIMUM = "SalaryBelowMinimum"
    IDENTIFIER_MISMATCH = "IdentifierMismatch"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class Violation:
    """A single reason a candidate record fails validation.

    Attributes:
        field: API field name, or ``record`` for cross-field rules.
        kind: Which rule was violated.
        message: Human-readable explanation.
    """

    field: str
    kind: ViolationKind
    message: str
