from decimal import Decimal

import pytest

from src.app.services.validation import (
    check_description,
    check_email,
    check_hours,
    check_name,
    first_error,
)


@pytest.mark.parametrize("name", ["alpha", "a", "a-b_c", "x" * 32, "123"])
def test_valid_names(name):
    assert check_name(name) is None


@pytest.mark.parametrize("name", ["", "Alpha", "x" * 33, "a b", "a.b", "é"])
def test_invalid_names(name):
    error = check_name(name, "role_name")
    assert error.code == "VALIDATION_FAILED"
    assert error.message == "role_name invalid format"


def test_description_must_have_content():
    assert check_description("demo") is None
    assert check_description(" \t ").message == "description missing"


def test_email_format():
    assert check_email("ada@example.com") is None
    assert check_email("ada").message == "email invalid format"


def test_hours_cannot_be_negative():
    assert check_hours(Decimal("0")) is None
    assert check_hours(Decimal("-0.01")) is not None


def test_first_error_keeps_argument_order():
    error = first_error(None, check_name("BAD"), check_description(""))
    assert error.message == "name invalid format"
