"""Single-attribute validation rules.

Each factory returns a rule: a pure callable taking a candidate record and
returning the list of violations it finds (empty when the value is fine).
Rules read the candidate's attribute by its Python name and report the
violation under the API (camelCase) field name.

Absent values are only reported by ``required``; every other rule skips a
value that is ``None`` (or an empty string for the format rules) so that a
missing field produces exactly one violation.
"""

import re
from collections.abc import Callable
from typing import Any

from email_validator import EmailNotValidError, validate_email

from validation.violations import Violation, ViolationKind

Rule = Callable[[Any], list[Violation]]

# Optional trailing extension, e.g. "ext. 42", "ext42", "x42"
_PHONE_EXTENSION = re.compile(r"\s*(?:ext\.?|x)\s*\d+$", re.IGNORECASE)
# Digits with separators; a "+" is only allowed in front
_PHONE_NUMBER = re.compile(r"^\+?[\d\s\-.()]*\d[\d\s\-.()]*$")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required(field: str, attr: str, message: str | None = None) -> Rule:
    """Fail with MissingField when the value is absent or blank."""
    message = message or f"The {field} field is required."

    def rule(candidate: Any) -> list[Violation]:
        if _is_blank(getattr(candidate, attr)):
            return [Violation(field, ViolationKind.MISSING_FIELD, message)]
        return []

    return rule


def text_length(
    field: str,
    attr: str,
    min_length: int,
    max_length: int,
    message: str | None = None,
) -> Rule:
    """Fail with InvalidLength when a present text is outside [min, max]."""
    message = message or (
        f"The field {field} must be a string with a minimum length of "
        f"{min_length} and a maximum length of {max_length}."
    )

    def rule(candidate: Any) -> list[Violation]:
        value = getattr(candidate, attr)
        if _is_blank(value):
            return []
        if not min_length <= len(value) <= max_length:
            return [Violation(field, ViolationKind.INVALID_LENGTH, message)]
        return []

    return rule


def number_range(
    field: str,
    attr: str,
    minimum: float,
    maximum: float,
    message: str | None = None,
) -> Rule:
    """Fail with OutOfRange when a present number is outside [min, max]."""
    message = message or f"The field {field} must be between {minimum} and {maximum}."

    def rule(candidate: Any) -> list[Violation]:
        value = getattr(candidate, attr)
        if value is None:
            return []
        if not minimum <= value <= maximum:
            return [Violation(field, ViolationKind.OUT_OF_RANGE, message)]
        return []

    return rule


def is_valid_email(value: str) -> bool:
    """Check an address against the email grammar, without DNS lookups."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: str) -> bool:
    """Check a phone number: digits, common separators, optional extension."""
    number = _PHONE_EXTENSION.sub("", value.strip())
    return bool(_PHONE_NUMBER.match(number))


def email_format(field: str, attr: str, message: str = "Email address is not valid.") -> Rule:
    """Fail with InvalidFormat when a non-empty value is not an email address."""

    def rule(candidate: Any) -> list[Violation]:
        value = getattr(candidate, attr)
        if _is_blank(value) or is_valid_email(value):
            return []
        return [Violation(field, ViolationKind.INVALID_FORMAT, message)]

    return rule


def phone_format(field: str, attr: str, message: str = "Phone is not valid.") -> Rule:
    """Fail with InvalidFormat when a non-empty value is not a phone number."""

    def rule(candidate: Any) -> list[Violation]:
        value = getattr(candidate, attr)
        if _is_blank(value) or is_valid_phone(value):
            return []
        return [Violation(field, ViolationKind.INVALID_FORMAT, message)]

    return rule
