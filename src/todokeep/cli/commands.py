# src/todokeep/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import ValidationError
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Name -> handler table used by the CLI (add, list, edit, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, list[str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._aliases[key] = [a.lower() for a in aliases]
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        """Primary command names in registration order (aliases excluded)."""
        return list(self._help)

    def help_for(self, name: str) -> str:
        return self._help[name.lower()]

    def aliases_for(self, name: str) -> list[str]:
        return list(self._aliases.get(name.lower(), []))

    def handle(self, state: AppState, name: str, args: list[str]) -> str:
        """
        Run one command and return the message to print.

        Domain errors (ValidationError, NotFoundError, ...) propagate to the caller.
        """
        handler = self._handlers.get(name.lower())
        if handler is None:
            raise ValidationError(f"Unknown command: {name}.")
        logger.debug("Dispatching command=%s args=%s", name, args)
        return handler(state, args)


registry = CommandRegistry()


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Task ID must be an integer, got {raw!r}.") from None


def _need(args: list[str], n: int, usage: str) -> None:
    if len(args) < n:
        raise ValidationError(f"Usage: {usage}")


def cmd_add(state: AppState, args: list[str]) -> str:
    _need(args, 1, "add TASK")
    task = state.store.add(" ".join(args))
    return f'✅ Added new to-do: "{task.description}" (ID: {task.id})'


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.store.list_tasks()
    if not tasks:
        return "No to-dos yet! Add one with the 'add' command."

    lines = ["--- Your To-Do List ---"]
    for t in tasks:
        status = "[x]" if t.completed else "[ ]"
        lines.append(f"{status} {t.id}: {t.description}")
    return "\n".join(lines)


def cmd_edit(state: AppState, args: list[str]) -> str:
    _need(args, 2, "edit ID --new-task TEXT")
    task = state.store.edit(_parse_id(args[0]), " ".join(args[1:]))
    return f'📝 Edited to-do {task.id}: "{task.description}"'


def cmd_complete(state: AppState, args: list[str]) -> str:
    _need(args, 1, "complete ID")
    task = state.store.complete(_parse_id(args[0]))
    return f'🎉 Completed to-do {task.id}: "{task.description}"'


def cmd_delete(state: AppState, args: list[str]) -> str:
    _need(args, 1, "delete ID")
    task = state.store.delete(_parse_id(args[0]))
    return f"🗑️ Deleted to-do with ID {task.id}."


registry.register("add", cmd_add, help_text="Add a new to-do item.")
registry.register("list", cmd_list, help_text="List all to-do items.", aliases=["ls"])
registry.register("edit", cmd_edit, help_text="Edit an existing to-do item's description.")
registry.register("complete", cmd_complete, help_text="Mark a to-do item as complete.", aliases=["done"])
registry.register("delete", cmd_delete, help_text="Delete a to-do item.", aliases=["rm"])
