"""Load and save user_data.json.

The whole collection lives in memory and the file is rewritten in full after
every mutation:

    store = RecordStore.open("user_data/user_data.json")
    store.records.append(UserRecord(id=new_record_id(), name="Alice", age=30))
    store.save()

File layout (a single JSON array, no version field):
    [
      {"id": "<uuid4>", "name": "Alice", "age": 30},
      ...
    ]

Saves truncate and rewrite the file in place. A failed write can leave a
partial file behind and the in-memory list is not rolled back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from roster.errors import StoreIOError, StoreParseError
from roster.models import UserRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("roster.store")


def load_records(path: Path | str) -> list[UserRecord]:
    """Read the data file. Raises StoreIOError or StoreParseError."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        logger.debug("malformed JSON in %s: %s", path, exc)
        raise StoreParseError(f"{path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("cannot read %s: %s", path, exc)
        raise StoreIOError(f"{path}: {exc}") from exc

    # A file holding `null` decodes like an empty slice would
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        msg = f"{path}: expected a JSON array, got {type(raw).__name__}"
        raise StoreParseError(msg)

    records: list[UserRecord] = []
    seen: set[str] = set()
    for i, obj in enumerate(raw):
        if not isinstance(obj, dict):
            msg = f"{path}: element {i} is not an object"
            raise StoreParseError(msg)
        try:
            record = UserRecord.from_dict(obj)
        except (KeyError, TypeError) as exc:
            msg = f"{path}: element {i} is not a valid record ({exc})"
            raise StoreParseError(msg) from exc
        if record.id in seen:
            msg = f"{path}: duplicate id {record.id}"
            raise StoreParseError(msg)
        seen.add(record.id)
        records.append(record)

    logger.info("loaded %d records from %s", len(records), path)
    return records


def save_records(path: Path | str, records: Iterable[UserRecord]) -> None:
    """Overwrite the data file with the full collection. Raises StoreIOError."""
    path = Path(path)
    data = [r.to_dict() for r in records]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
            f.write("\n")
    except OSError as exc:
        logger.debug("cannot write %s: %s", path, exc)
        raise StoreIOError(f"{path}: {exc}") from exc
    logger.info("saved %d records to %s", len(data), path)


def init_store(path: Path | str) -> bool:
    """Create an empty data file if none exists. Returns True if one was written."""
    path = Path(path)
    if path.exists():
        return False
    save_records(path, [])
    return True


class RecordStore:
    """In-memory collection of user records bound to its data file."""

    def __init__(self, path: Path | str, records: list[UserRecord] | None = None) -> None:
        self.path = Path(path)
        self.records: list[UserRecord] = records if records is not None else []

    @classmethod
    def open(cls, path: Path | str) -> RecordStore:
        """Load the data file into a new store."""
        return cls(path, load_records(path))

    def save(self) -> None:
        save_records(self.path, self.records)

    def ids(self) -> set[str]:
        return {r.id for r in self.records}

    def names(self) -> list[str]:
        """Record names in current collection order."""
        return [r.name for r in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[UserRecord]:
        return iter(self.records)
