"""Shared fixtures: temporary data files and a scripted prompt."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
import pytest

from roster.store import RecordStore


def write_records(path: Path, records: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records))


def read_records(path: Path) -> list[dict[str, Any]]:
    return json.loads(path.read_text())


@pytest.fixture()
def data_path(tmp_path: Path) -> Path:
    path = tmp_path / "user_data" / "user_data.json"
    write_records(path, [])
    return path


@pytest.fixture()
def store(data_path: Path) -> RecordStore:
    return RecordStore.open(data_path)


@pytest.fixture()
def seeded_path(tmp_path: Path) -> Path:
    path = tmp_path / "user_data" / "user_data.json"
    write_records(path, [
        {"id": "id-zoe", "name": "Zoe", "age": 20},
        {"id": "id-alice", "name": "Alice", "age": 30},
    ])
    return path


@pytest.fixture()
def seeded_store(seeded_path: Path) -> RecordStore:
    return RecordStore.open(seeded_path)


ABORT = "<ctrl-c>"


class ScriptedPrompt:
    """Stand-in for click.prompt that answers from a list.

    Applies value_proc / type conversion the way click does, recording every
    rejection message. ABORT in the script, or an exhausted script, raises
    click.Abort like an interrupt or a closed stdin.
    """

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.labels: list[str] = []
        self.defaults: list[Any] = []
        self.errors: list[str] = []

    def __call__(self, label: str, **kwargs: Any) -> Any:
        self.labels.append(label)
        self.defaults.append(kwargs.get("default"))
        while True:
            if not self.answers:
                raise click.Abort()
            answer = self.answers.pop(0)
            if answer == ABORT:
                raise click.Abort()
            if answer == "" and kwargs.get("default") is not None:
                answer = kwargs["default"]
            try:
                if "value_proc" in kwargs:
                    return kwargs["value_proc"](answer)
                if "type" in kwargs:
                    return kwargs["type"].convert(answer, None, None)
                return answer
            except click.UsageError as exc:
                self.errors.append(exc.message)


@pytest.fixture()
def scripted():
    def make(*answers: str) -> ScriptedPrompt:
        return ScriptedPrompt(list(answers))
    return make
