from __future__ import annotations

from decimal import Decimal

import pytest

from schemas.staff import StaffCandidate
from validation.field_rules import (
    email_format,
    is_valid_email,
    is_valid_phone,
    number_range,
    phone_format,
    required,
    text_length,
)
from validation.validator import staff_validator
from validation.violations import ViolationKind


def kinds(violations):
    return [v.kind for v in violations]


@pytest.mark.parametrize("name", [None, "", "   "])
def test_required_reports_missing_values(name):
    rule = required("name", "name")
    violations = rule(StaffCandidate(name=name))
    assert kinds(violations) == [ViolationKind.MISSING_FIELD]
    assert violations[0].field == "name"


def test_text_length_bounds_are_inclusive():
    rule = text_length("name", "name", 10, 250)
    assert rule(StaffCandidate(name="a" * 10)) == []
    assert rule(StaffCandidate(name="a" * 250)) == []
    assert kinds(rule(StaffCandidate(name="a" * 9))) == [ViolationKind.INVALID_LENGTH]
    assert kinds(rule(StaffCandidate(name="a" * 251))) == [ViolationKind.INVALID_LENGTH]


def test_text_length_leaves_missing_value_to_required():
    rule = text_length("name", "name", 10, 250)
    assert rule(StaffCandidate(name=None)) == []


def test_number_range_bounds_are_inclusive():
    rule = number_range("hourlySalary", "hourly_salary", 30, 400)
    assert rule(StaffCandidate(hourly_salary=Decimal("30"))) == []
    assert rule(StaffCandidate(hourly_salary=Decimal("400"))) == []
    assert rule(StaffCandidate(hourly_salary=None)) == []
    below = rule(StaffCandidate(hourly_salary=Decimal("29.99")))
    assert kinds(below) == [ViolationKind.OUT_OF_RANGE]
    assert below[0].field == "hourlySalary"
    assert kinds(rule(StaffCandidate(hourly_salary=Decimal("400.01")))) == [
        ViolationKind.OUT_OF_RANGE
    ]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("jane.doe@acme.io", True),
        ("first.last+tag@mail.co.uk", True),
        ("not-an-email", False),
        ("two@@signs.io", False),
        ("@acme.io", False),
        ("jane@", False),
    ],
)
def test_email_grammar(value, expected):
    assert is_valid_email(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("555-123-4567", True),
        ("+1 (555) 123-4567", True),
        ("555.123.4567 ext. 42", True),
        ("5551234567x9", True),
        ("+90 212 555 00 00", True),
        ("call me", False),
        ("555-CALL-NOW", False),
        ("12+34", False),
        ("()--", False),
    ],
)
def test_phone_grammar(value, expected):
    assert is_valid_phone(value) is expected


def test_format_rules_ignore_empty_values():
    email_rule = email_format("email", "email")
    phone_rule = phone_format("phone", "phone")
    for value in (None, ""):
        candidate = StaffCandidate(email=value, phone=value)
        assert email_rule(candidate) == []
        assert phone_rule(candidate) == []


def test_format_rules_report_invalid_values():
    candidate = StaffCandidate(email="nope", phone="nope")
    email_violations = email_format("email", "email")(candidate)
    phone_violations = phone_format("phone", "phone")(candidate)
    assert kinds(email_violations) == [ViolationKind.INVALID_FORMAT]
    assert email_violations[0].message == "Email address is not valid."
    assert kinds(phone_violations) == [ViolationKind.INVALID_FORMAT]
    assert phone_violations[0].message == "Phone is not valid."


def test_staff_validator_collects_every_violation():
    candidate = StaffCandidate(
        name="short",
        email="nope",
        phone="nope",
        hourly_salary=Decimal("1000"),
    )
    violations = staff_validator().validate(candidate)
    assert sorted(kinds(violations)) == sorted(
        [
            ViolationKind.INVALID_LENGTH,
            ViolationKind.INVALID_FORMAT,
            ViolationKind.INVALID_FORMAT,
            ViolationKind.OUT_OF_RANGE,
        ]
    )


def test_staff_validator_accepts_minimal_record():
    assert staff_validator().validate(StaffCandidate(name="Morgan Avery Lee")) == []
