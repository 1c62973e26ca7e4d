"""Interactive menu loop over a RecordStore.

One state (awaiting a menu selection) and five transitions. Every action
returns to the menu except Quit. Invalid field input is rejected inline and
re-asked. An aborted field prompt cancels the action; an aborted menu prompt
ends the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from roster.errors import PromptAborted, RosterError, StoreError
from roster.operations import (
    add_record,
    delete_record,
    edit_record,
    find_by_name,
    is_confirmed,
    list_records,
)
from roster.validators import validate_age, validate_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from roster.store import RecordStore
    from roster.validators import Validation

PROMPT_FAILED = "Prompt failed:"

ADD = "Add user"
DISPLAY = "Display users"
EDIT = "Edit user"
DELETE = "Delete user"
QUIT = "Quit"
MENU_ITEMS = [ADD, DISPLAY, EDIT, DELETE, QUIT]


def _checked(validator: Callable[[str], Validation]) -> Callable[[str], str]:
    """Adapt a validator to click's value_proc: reject with BadParameter, keep the raw text."""
    def proc(text: str) -> str:
        result = validator(text)
        if not result.ok:
            raise click.BadParameter(result.message)
        return text
    return proc


class RosterShell:
    """Menu-driven editor for the records held by store."""

    def __init__(
        self,
        store: RecordStore,
        *,
        prompt: Callable[..., Any] = click.prompt,
        echo: Callable[..., Any] = click.echo,
    ) -> None:
        self.store = store
        self._prompt = prompt
        self._echo = echo
        self._actions: dict[str, Callable[[], None]] = {
            ADD: self.add_user,
            DISPLAY: self.display_users,
            EDIT: self.edit_user,
            DELETE: self.delete_user,
        }

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Serve menu selections until Quit or a failed prompt."""
        while True:
            try:
                choice = self._select("Select an action", MENU_ITEMS)
            except PromptAborted as exc:
                self._echo(f"{PROMPT_FAILED} {exc}")
                return
            if choice == QUIT:
                self._echo("Quitting the program.")
                return
            # An abort inside an action only cancels that action
            try:
                self._actions[choice]()
            except PromptAborted as exc:
                self._echo(f"{PROMPT_FAILED} {exc}")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_user(self) -> None:
        name = self._ask("Enter the name", validate_name)
        age = self._ask("Enter the age", validate_age)
        self._apply(lambda: add_record(self.store, name, age), "User added successfully.")

    def display_users(self) -> None:
        self._echo("Users:")
        for record in list_records(self.store):
            self._echo(f"Name: {record.name}, Age: {record.age}")

    def edit_user(self) -> None:
        if not self.store.records:
            self._echo("No users to edit.")
            return
        selected = self._select("Select a user to edit", self.store.names())
        current = self.store.records[find_by_name(self.store, selected)]
        new_name = self._ask("Enter the new name", validate_name, default=current.name)
        new_age = self._ask("Enter the new age", validate_age, default=str(current.age))
        self._apply(
            lambda: edit_record(self.store, selected, new_name, new_age),
            lambda record: f"User with ID {record.id} edited successfully.",
        )

    def delete_user(self) -> None:
        if not self.store.records:
            self._echo("No users to delete.")
            return
        selected = self._select("Select a user to delete", self.store.names())
        answer = self._ask(f"Are you sure you want to delete user '{selected}'? (yes/no)")
        if not is_confirmed(answer):
            self._echo("Deletion canceled.")
            return
        self._apply(
            lambda: delete_record(self.store, selected),
            lambda record: f"User '{record.name}' with ID {record.id} deleted successfully.",
        )

    # ------------------------------------------------------------------
    # Prompt helpers
    # ------------------------------------------------------------------

    def _apply(self, action: Callable[[], Any], done: str | Callable[[Any], str]) -> None:
        """Run one operation and report its outcome. Errors go back to the menu."""
        try:
            result = action()
        except StoreError as exc:
            self._echo(f"Failed to save data to file: {exc}")
            return
        except RosterError as exc:
            self._echo(str(exc))
            return
        self._echo(done(result) if callable(done) else done)

    def _ask(
        self,
        label: str,
        validator: Callable[[str], Validation] | None = None,
        *,
        default: str | None = None,
    ) -> str:
        # An empty default lets a bare Enter reach the validator as ""
        kwargs: dict[str, Any] = {
            "default": default if default is not None else "",
            "show_default": default is not None,
        }
        if validator is not None:
            kwargs["value_proc"] = _checked(validator)
        try:
            return str(self._prompt(label, **kwargs))
        except click.Abort as exc:
            raise PromptAborted(str(exc) or "input closed") from exc

    def _select(self, label: str, items: list[str]) -> str:
        """Show a numbered list and return the chosen item."""
        for i, item in enumerate(items, start=1):
            self._echo(f"  {i}) {item}")
        try:
            index = self._prompt(label, type=click.IntRange(1, len(items)))
        except click.Abort as exc:
            raise PromptAborted(str(exc) or "input closed") from exc
        return items[int(index) - 1]
