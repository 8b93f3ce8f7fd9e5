"""Validation package."""

from validation.policies import DEFAULT_POLICY, SalaryPolicy, SeniorityTier
from validation.validator import RecordValidator, employee_validator, staff_validator
from validation.violations import RECORD_FIELD, Violation, ViolationKind

__all__ = [
    "DEFAULT_POLICY",
    "RECORD_FIELD",
    "RecordValidator",
    "SalaryPolicy",
    "SeniorityTier",
    "Violation",
    "ViolationKind",
    "employee_validator",
    "staff_validator",
]
