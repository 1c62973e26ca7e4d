"""Add, list, edit and delete user records.

Every function takes the owning RecordStore, mutates store.records and
persists the whole collection before returning. When the save fails the
in-memory change stays in place and StoreError propagates to the caller.

Lookups by name return the first exact match in collection order, so with
duplicate names the earliest entry wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roster.errors import EmptyCollectionError, RecordNotFoundError
from roster.models import UserRecord, new_record_id
from roster.validators import validate_age, validate_name

if TYPE_CHECKING:
    from roster.store import RecordStore

logger = logging.getLogger("roster.operations")

CONFIRM_WORD = "yes"


def _coerce_age(age: int | str) -> int:
    # Prompt input arrives as text, programmatic callers pass ints
    return validate_age(str(age) if isinstance(age, int) else age).unwrap()


def _fresh_id(store: RecordStore) -> str:
    taken = store.ids()
    record_id = new_record_id()
    while record_id in taken:
        record_id = new_record_id()
    return record_id


def add_record(store: RecordStore, name: str, age: int | str) -> UserRecord:
    """Validate, append a record with a fresh ID and save."""
    name = validate_name(name).unwrap()
    age = _coerce_age(age)
    record = UserRecord(id=_fresh_id(store), name=name, age=age)
    store.records.append(record)
    logger.info("added %s (%s)", record.id, record.name)
    store.save()
    return record


def list_records(store: RecordStore) -> list[UserRecord]:
    """Sort the shared collection by name in place and return it."""
    store.records.sort(key=lambda r: r.name)
    return store.records


def find_by_name(store: RecordStore, name: str) -> int:
    """Index of the first record whose name equals name exactly."""
    for i, record in enumerate(store.records):
        if record.name == name:
            return i
    raise RecordNotFoundError(f"No user named '{name}'.")


def edit_record(store: RecordStore, name: str, new_name: str, new_age: int | str) -> UserRecord:
    """Replace name and age of the first record called name. ID and position are kept."""
    if not store.records:
        raise EmptyCollectionError("No users to edit.")
    index = find_by_name(store, name)
    new_name = validate_name(new_name).unwrap()
    new_age = _coerce_age(new_age)

    record = store.records[index]
    record.name = new_name
    record.age = new_age
    logger.info("edited %s at position %d", record.id, index)
    store.save()
    return record


def delete_record(store: RecordStore, name: str) -> UserRecord:
    """Remove the first record called name and save. Returns the removed record."""
    if not store.records:
        raise EmptyCollectionError("No users to delete.")
    index = find_by_name(store, name)
    record = store.records.pop(index)
    logger.info("deleted %s from position %d", record.id, index)
    store.save()
    return record


def is_confirmed(answer: str) -> bool:
    """Only a literal, case-insensitive "yes" confirms a deletion."""
    return answer.lower() == CONFIRM_WORD
