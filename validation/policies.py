"""Cross-field rules for employees: age limit and age-tiered minimum salary.

Both rules are evaluated against ``today``, so a record accepted yesterday
can be rejected today purely because time has passed.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from validation.field_rules import Rule
from validation.violations import RECORD_FIELD, Violation, ViolationKind


class SeniorityTier(str, Enum):
    JUNIOR = "junior"
    SENIOR = "senior"


@dataclass(frozen=True)
class SalaryPolicy:
    """Thresholds of the employee age and salary rules."""

    min_junior_salary: float = 50
    min_senior_salary: float = 200
    senior_age_years: int = 30
    max_age_years: int = 65

    def minimum_salary(self, tier: SeniorityTier) -> float:
        if tier is SeniorityTier.SENIOR:
            return self.min_senior_salary
        return self.min_junior_salary


DEFAULT_POLICY = SalaryPolicy()


def years_before(day: date, years: int) -> date:
    """Return the same calendar day ``years`` earlier.

    February 29 maps to February 28 when the target year is not a leap year.
    """
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def seniority_tier(
    date_of_birth: date,
    today: date,
    policy: SalaryPolicy = DEFAULT_POLICY,
) -> SeniorityTier:
    """Classify by age: born on or before the threshold date is senior."""
    threshold = years_before(today, policy.senior_age_years)
    if date_of_birth <= threshold:
        return SeniorityTier.SENIOR
    return SeniorityTier.JUNIOR


def birth_date_within_age_limit(
    today: date,
    policy: SalaryPolicy = DEFAULT_POLICY,
    attr: str = "date_of_birth",
) -> Rule:
    """Fail with InvalidBirthDate when the person is older than the age limit.

    Someone whose birthday is exactly ``max_age_years`` ago is still accepted.
    """
    earliest_birth_date = years_before(today, policy.max_age_years)

    def rule(candidate: Any) -> list[Violation]:
        date_of_birth = getattr(candidate, attr)
        if date_of_birth is None:
            return []
        if date_of_birth < earliest_birth_date:
            return [
                Violation(
                    RECORD_FIELD,
                    ViolationKind.INVALID_BIRTH_DATE,
                    "Birthdate is not valid.",
                )
            ]
        return []

    return rule


def minimum_salary_by_age(
    today: date,
    policy: SalaryPolicy = DEFAULT_POLICY,
    birth_attr: str = "date_of_birth",
    salary_attr: str = "hourly_salary",
) -> Rule:
    """Fail with SalaryBelowMinimum when pay is under the tier's minimum.

    This is applied on top of the absolute salary range; a salary can be in
    range and still be too low for a senior employee.
    """

    def rule(candidate: Any) -> list[Violation]:
        date_of_birth = getattr(candidate, birth_attr)
        hourly_salary = getattr(candidate, salary_attr)
        if date_of_birth is None or hourly_salary is None:
            return []
        tier = seniority_tier(date_of_birth, today, policy)
        if hourly_salary < policy.minimum_salary(tier):
            return [
                Violation(
                    RECORD_FIELD,
                    ViolationKind.SALARY_BELOW_MINIMUM,
                    "Minimum hourly salary is not valid.",
                )
            ]
        return []

    return rule
