"""Name and age validation."""

from __future__ import annotations

import pytest

from roster.errors import ValidationError
from roster.validators import ValidationFailure, validate_age, validate_name


@pytest.mark.parametrize("name", ["A", "Alice", "bob", "Zoë", "José", "Åsa"])
def test_name_accepts_letters(name):
    result = validate_name(name)
    assert result.ok
    assert result.value == name


def test_name_rejects_empty():
    result = validate_name("")
    assert result.failure is ValidationFailure.EMPTY_NAME
    assert result.failure.kind == "empty_input"
    assert result.message == "Name cannot be empty"


@pytest.mark.parametrize("name", ["Al1ce", "Mary Ann", "Jean-Luc", "O'Neil", "Bob!", " "])
def test_name_rejects_non_letters(name):
    result = validate_name(name)
    assert result.failure is ValidationFailure.INVALID_CHARS
    assert result.message == "Name can only contain letters"


@pytest.mark.parametrize(("text", "age"), [("0", 0), ("150", 150), ("42", 42), ("+7", 7)])
def test_age_accepts_range(text, age):
    result = validate_age(text)
    assert result.ok
    assert result.value == age


@pytest.mark.parametrize(
    ("text", "failure"),
    [
        ("", ValidationFailure.EMPTY_AGE),
        ("abc", ValidationFailure.NOT_A_NUMBER),
        ("4.5", ValidationFailure.NOT_A_NUMBER),
        (" 42", ValidationFailure.NOT_A_NUMBER),
        ("-1", ValidationFailure.OUT_OF_RANGE),
        ("151", ValidationFailure.OUT_OF_RANGE),
    ],
)
def test_age_rejections(text, failure):
    result = validate_age(text)
    assert not result.ok
    assert result.failure is failure


def test_out_of_range_message():
    assert validate_age("200").message == "Invalid age: must be between 0 and 150"


def test_unwrap_raises_validation_error():
    with pytest.raises(ValidationError) as excinfo:
        validate_age("abc").unwrap()
    assert excinfo.value.failure is ValidationFailure.NOT_A_NUMBER
    assert str(excinfo.value) == "Invalid age: must be a number"


def test_unwrap_returns_zero_age():
    assert validate_age("0").unwrap() == 0
