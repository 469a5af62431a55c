# src/todokeep/cli/main.py

"""
CLI entrypoint.

One invocation = load the task file, run one command, save if anything
changed, exit. Domain errors become "Error: ..." on stderr and a non-zero
exit code (see core/errors.py for the codes).
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..core.errors import TodoError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return version("todokeep")
    except PackageNotFoundError:
        return "unknown"


def build_parser(app_name: str = "todokeep") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=app_name, description="A small local to-do list.")
    parser.add_argument("--file", dest="store_path", help="Storage file (default: todos.json).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    def add_parser(name: str) -> argparse.ArgumentParser:
        return sub.add_parser(
            name,
            help=command_registry.help_for(name),
            aliases=command_registry.aliases_for(name),
        )

    add_parser("add").add_argument("task", help="The task description.")
    add_parser("list")

    edit_p = add_parser("edit")
    edit_p.add_argument("id", type=int, help="The ID of the to-do to edit.")
    edit_p.add_argument("-n", "--new-task", required=True, help="The new task description.")

    add_parser("complete").add_argument("id", type=int, help="The ID of the to-do to complete.")
    add_parser("delete").add_argument("id", type=int, help="The ID of the to-do to delete.")
    return parser


def _command_args(ns: argparse.Namespace) -> list[str]:
    out: list[str] = []
    if getattr(ns, "id", None) is not None:
        out.append(str(ns.id))
    if getattr(ns, "task", None) is not None:
        out.append(ns.task)
    if getattr(ns, "new_task", None) is not None:
        out.append(ns.new_task)
    return out


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ns = build_parser(settings.app_name).parse_args(argv)

    level_name = "DEBUG" if ns.verbose else str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        console_level=console_level,
        log_dir=settings.log_dir if settings.log_to_file else None,
    )

    try:
        state = create_initial_state(settings=settings, store_path=ns.store_path)
        message = command_registry.handle(state, ns.command, _command_args(ns))
        # Durability is part of the command: a failed save fails the command.
        state.save_if_dirty()
    except TodoError as exc:
        logger.debug("Command %s failed", ns.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
