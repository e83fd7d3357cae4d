# src/astro_schedule/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import Outcome
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry (/help, /add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

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
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like '/add "Morning run" 07:00 07:30 High'.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}"
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Dispatching /%s args=%r", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

# Every reply that reports a failed command starts with one of these.
FAILURE_PREFIXES = ("Error:", "Usage:", "Unknown command:", "Empty command.", "Could not parse command:")


def is_failure(reply: str | None) -> bool:
    return reply is None or reply.startswith(FAILURE_PREFIXES)


def _format_tasks(tasks: list[Task]) -> str:
    return "\n".join(t.render() for t in tasks)


def _reply(result: task_api.CommandResult) -> str:
    if result.outcome is Outcome.PERSISTENCE_FAILURE:
        return f"Error: {result.message}. Changes were not saved."
    if not result.ok:
        return f"Error: {result.message}"
    return result.message


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <description> <HH:MM> <HH:MM> <priority>"""
    if len(args) != 4:
        return 'Usage: /add "<description>" <start HH:MM> <end HH:MM> <priority>'
    return _reply(task_api.add_task(state, *args))


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /remove "<description>"'
    return _reply(task_api.remove_task(state, args[0]))


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <description> <new description> <HH:MM> <HH:MM> <priority>"""
    if len(args) != 5:
        return (
            'Usage: /edit "<description>" "<new description>" '
            "<new start HH:MM> <new end HH:MM> <new priority>"
        )
    return _reply(task_api.edit_task(state, *args))


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /done "<description>"'
    return _reply(task_api.complete_task(state, args[0]))


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = task_api.list_tasks(state)
    if not tasks:
        return "No tasks scheduled for the day."
    return _format_tasks(tasks)


def cmd_filter(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /filter <priority>"
    tasks = task_api.filter_by_priority(state, args[0])
    if not tasks:
        return f"No tasks with priority: {args[0]}"
    return _format_tasks(tasks)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text='Add a task: /add "<description>" 09:00 09:30 High.')
registry.register("remove", cmd_remove, help_text="Remove a task by description.", aliases=["rm"])
registry.register(
    "edit",
    cmd_edit,
    help_text='Edit a task: /edit "<old>" "<new>" 10:00 10:30 Low.',
)
registry.register("done", cmd_done, help_text="Mark a task as completed.", aliases=["complete"])
registry.register("list", cmd_list, help_text="Show all tasks sorted by start time.", aliases=["ls"])
registry.register("filter", cmd_filter, help_text="Show tasks with a priority: /filter High.")
