# tests/test_commands.py

from __future__ import annotations

import logging

import pytest

from astronaut_scheduler.cli.commands import NO_TASKS_TEXT, CommandRegistry, registry


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args, emit):
        seen.append(args)
        if emit is not None:
            emit("note")
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, '/a "two words" x') == "ok"
    assert reg.handle(state, "/ALPHA", emit=lambda _: None) == "ok"
    assert seen == [["two words", "x"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")
    assert "Cannot parse" in (reg.handle(state, '/add "unterminated') or "")


def test_list_when_empty(state) -> None:
    assert registry.handle(state, "/list") == NO_TASKS_TEXT


def test_add_list_remove_flow(state) -> None:
    reply = registry.handle(state, '/add "Team Meeting" 09:00 10:00 High')
    assert reply == "Scheduled: 09:00 - 10:00: Team Meeting [High]"

    registry.handle(state, '/add "Morning Exercise" 07:00 08:00')
    assert registry.handle(state, "/ls") == (
        "07:00 - 08:00: Morning Exercise [Medium]\n09:00 - 10:00: Team Meeting [High]"
    )

    assert registry.handle(state, "/rm morning exercise") == (
        "Removed: 07:00 - 08:00: Morning Exercise [Medium]"
    )
    assert [t.description for t in state.manager.view_tasks()] == ["Team Meeting"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ('/add "Nap" 7am 08:00', "Failed: Invalid time format. Use HH:mm"),
        ('/add "Nap" 09:00 08:00', "Failed: Start time must be before End time"),
        ("/remove Dinner", "Failed: Task not found."),
    ],
)
def test_failures_are_logged_on_error_channel(
    state, caplog: pytest.LogCaptureFixture, line: str, expected: str
) -> None:
    with caplog.at_level(logging.ERROR, logger="astronaut_scheduler.cli.commands"):
        assert registry.handle(state, line) == expected

    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert caplog.records[0].getMessage() == expected.removeprefix("Failed: ")


def test_conflict_notifies_watchers(state, emitted: list[str]) -> None:
    assert registry.handle(state, "/watch Neil") == "Neil will be notified of schedule conflicts."
    assert registry.handle(state, "/watch neil") == "neil is already receiving notifications."
    registry.handle(state, '/add "Team Meeting" 09:00 10:00')

    reply = registry.handle(state, '/add "Training Session" 09:30 10:30 High')

    assert reply == 'Failed: Task conflicts with existing task "Team Meeting"'
    assert emitted == ['[NOTIFY Neil]: Conflict with task "Team Meeting"']


def test_unwatch_and_crew(state, emitted: list[str]) -> None:
    assert "Nobody" in registry.handle(state, "/crew")
    registry.handle(state, "/watch Neil")
    registry.handle(state, "/watch Buzz")
    assert registry.handle(state, "/crew") == "Notified crew: Neil, Buzz"

    assert registry.handle(state, "/unwatch neil") == "neil will no longer be notified."
    assert registry.handle(state, "/unwatch Neil") == "Neil is not receiving notifications."

    state.manager.notify("ping")
    assert emitted == ["[NOTIFY Buzz]: ping"]


def test_usage_messages(state) -> None:
    assert registry.handle(state, "/add only two").startswith("Usage:")
    assert registry.handle(state, "/remove").startswith("Usage:")
    assert registry.handle(state, "/watch").startswith("Usage:")
    assert registry.handle(state, "/unwatch").startswith("Usage:")
