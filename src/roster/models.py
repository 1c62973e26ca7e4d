"""Data models for the user roster."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any


def new_record_id() -> str:
    """Generate a random record ID in canonical UUID form."""
    return str(uuid.uuid4())


@dataclass
class UserRecord:
    """One entry of user_data.json."""

    id: str
    name: str
    age: int

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> UserRecord:
        record_id = d["id"]
        name = d["name"]
        age = d["age"]
        if not isinstance(record_id, str) or not isinstance(name, str):
            msg = f"id and name must be strings: {d!r}"
            raise TypeError(msg)
        # bool is an int subclass; reject it explicitly
        if isinstance(age, bool) or not isinstance(age, int):
            msg = f"age must be an integer: {d!r}"
            raise TypeError(msg)
        return cls(id=record_id, name=name, age=age)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
        }
