"""Exception hierarchy shared by the store, operations and shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster.validators import ValidationFailure


class RosterError(Exception):
    """Base class for all roster errors."""


class StoreError(RosterError):
    """The data file could not be read, parsed or written."""


class StoreIOError(StoreError):
    """The data file is missing, unreadable or unwritable."""


class StoreParseError(StoreError):
    """The data file does not hold a JSON array of user records."""


class ValidationError(RosterError):
    """A name or age failed validation."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class RecordNotFoundError(RosterError):
    """No record carries the requested name."""


class EmptyCollectionError(RosterError):
    """The operation needs at least one record."""


class PromptAborted(RosterError):
    """Input stream closed or interrupted while waiting on a prompt."""
