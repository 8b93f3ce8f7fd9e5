"""Rule sets for each resource and the validator that runs them."""

from collections.abc import Iterable
from datetime import date
from typing import Any

from validation.field_rules import (
    Rule,
    email_format,
    number_range,
    phone_format,
    required,
    text_length,
)
from validation.policies import (
    DEFAULT_POLICY,
    SalaryPolicy,
    birth_date_within_age_limit,
    minimum_salary_by_age,
)
from validation.violations import Violation

SALARY_RANGE_MESSAGE = "Hourly salary does not fall within allowed range."


class RecordValidator:
    """Runs an ordered list of rules and concatenates every violation found.

    Rules never short-circuit each other, so a caller sees all problems with
    a candidate at once.
    """

    def __init__(self, rules: Iterable[Rule]):
        self.rules = list(rules)

    def validate(self, candidate: Any) -> list[Violation]:
        violations: list[Violation] = []
        for rule in self.rules:
            violations.extend(rule(candidate))
        return violations


def employee_validator(today: date, policy: SalaryPolicy = DEFAULT_POLICY) -> RecordValidator:
    """Field rules plus the age-based policies, evaluated as of ``today``."""
    return RecordValidator(
        [
            required("name", "name"),
            text_length("name", "name", 10, 250, message="Invalid Name"),
            required("dateOfBirth", "date_of_birth"),
            email_format("email", "email"),
            phone_format("phone", "phone"),
            required("hourlySalary", "hourly_salary"),
            number_range("hourlySalary", "hourly_salary", 50, 400, message=SALARY_RANGE_MESSAGE),
            birth_date_within_age_limit(today, policy),
            minimum_salary_by_age(today, policy),
        ]
    )


def staff_validator() -> RecordValidator:
    return RecordValidator(
        [
            required("name", "name"),
            text_length("name", "name", 10, 250),
            email_format("email", "email"),
            phone_format("phone", "phone"),
            number_range("hourlySalary", "hourly_salary", 30, 400, message=SALARY_RANGE_MESSAGE),
        ]
    )
