"""Name and age validation.

Validators never raise: they return a Validation carrying either the
normalised value or the reason it was rejected, so prompt loops can re-ask
and operations can call .unwrap() to turn a rejection into ValidationError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from roster.errors import ValidationError

MIN_AGE = 0
MAX_AGE = 150

# Signed decimal integer with no surrounding whitespace
_INT_RE = re.compile(r"[+-]?[0-9]+")


class ValidationFailure(Enum):
    EMPTY_NAME = ("empty_input", "Name cannot be empty")
    INVALID_CHARS = ("invalid_chars", "Name can only contain letters")
    EMPTY_AGE = ("empty_input", "Age cannot be empty")
    NOT_A_NUMBER = ("not_a_number", "Invalid age: must be a number")
    OUT_OF_RANGE = ("out_of_range", f"Invalid age: must be between {MIN_AGE} and {MAX_AGE}")

    @property
    def kind(self) -> str:
        """Failure category: empty_input | invalid_chars | not_a_number | out_of_range."""
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Validation:
    """Outcome of validating one field."""

    value: Any = None
    failure: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> str:
        return self.failure.message if self.failure else ""

    def unwrap(self) -> Any:
        """Return the value, or raise ValidationError for a rejected field."""
        if self.failure is not None:
            raise ValidationError(self.failure)
        return self.value


def validate_name(text: str) -> Validation:
    if text == "":
        return Validation(failure=ValidationFailure.EMPTY_NAME)
    if not all(ch.isalpha() for ch in text):
        return Validation(failure=ValidationFailure.INVALID_CHARS)
    return Validation(value=text)


def validate_age(text: str) -> Validation:
    if text == "":
        return Validation(failure=ValidationFailure.EMPTY_AGE)
    if not _INT_RE.fullmatch(text):
        return Validation(failure=ValidationFailure.NOT_A_NUMBER)
    age = int(text)
    if age < MIN_AGE or age > MAX_AGE:
        return Validation(failure=ValidationFailure.OUT_OF_RANGE)
    return Validation(value=age)
