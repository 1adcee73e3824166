# src/astronaut_scheduler/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..schedule.results import Err
from ..schedule.task_factory import create_task

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, list[str], CommandEmitter | None], str]

NO_TASKS_TEXT = "No tasks scheduled for the day."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command args'.
        Arguments are split shell-style, so '/add "Team Meeting" 09:00 10:00' works.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_schedule(state: AppState) -> str:
    tasks = state.manager.view_tasks()
    if not tasks:
        return NO_TASKS_TEXT
    return "\n".join(str(t) for t in tasks)


def _failed(result: Err) -> str:
    # Failed results go to the error channel here; the core only logs successes.
    logger.error("%s", result.error.message)
    return f"Failed: {result.error.message}"


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add "<description>" <start> <end> [priority]
    """
    if len(args) < 3:
        return 'Usage: /add "<description>" <HH:MM> <HH:MM> [priority]'

    description, start_text, end_text = args[0], args[1], args[2]
    priority = " ".join(args[3:]) or str(getattr(state.settings, "default_priority", "Medium"))

    built = create_task(description, start_text, end_text, priority)
    if isinstance(built, Err):
        return _failed(built)

    added = state.manager.add_task(built.value)
    if isinstance(added, Err):
        return _failed(added)

    return f"Scheduled: {added.value}"


def cmd_remove(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /remove <description>   (quotes optional; remaining words are joined)
    """
    if not args:
        return "Usage: /remove <description>"

    removed = state.manager.remove_task(" ".join(args))
    if isinstance(removed, Err):
        return _failed(removed)
    return f"Removed: {removed.value}"


def cmd_list(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return render_schedule(state)


def cmd_watch(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /watch <name>"
    name = " ".join(args)
    if not state.watch(name):
        return f"{name} is already receiving notifications."
    logger.debug("Watch requested for %s", name)
    return f"{name} will be notified of schedule conflicts."


def cmd_unwatch(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /unwatch <name>"
    name = " ".join(args)
    if not state.unwatch(name):
        return f"{name} is not receiving notifications."
    return f"{name} will no longer be notified."


def cmd_crew(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    names = [n.name for n in state.notifiers.values()]
    if not names:
        return "Nobody is receiving notifications. Use /watch <name>."
    return "Notified crew: " + ", ".join(names)


def cmd_demo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    from ..demo import run_demo

    run_demo(state, emit=emit or print)
    return "Demo finished."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add "<description>" <HH:MM> <HH:MM> [priority].',
)
registry.register(
    "remove", cmd_remove, help_text="Remove a task by description: /remove <description>.", aliases=["rm"]
)
registry.register("list", cmd_list, help_text="Show today's tasks in start order.", aliases=["ls"])
registry.register("watch", cmd_watch, help_text="Notify a crew member of conflicts: /watch <name>.")
registry.register("unwatch", cmd_unwatch, help_text="Stop notifying a crew member: /unwatch <name>.")
registry.register("crew", cmd_crew, help_text="List crew members receiving notifications.")
registry.register("demo", cmd_demo, help_text="Replay the sample day (adds/removes tasks).")
