"""Pytest fixtures for select-dialog tests."""

from __future__ import annotations

import pytest


class FakeTerminal:
    """Terminal that records every call as an (op, arg) tuple."""

    def __init__(self):
        self.ops: list[tuple[str, object]] = []

    def write_line(self, text):
        self.ops.append(("write", str(text)))

    def move_cursor_up(self, n):
        self.ops.append(("up", n))

    def clear_line(self):
        self.ops.append(("clear", None))

    def written(self) -> list[str]:
        return [arg for op, arg in self.ops if op == "write"]


class ScriptedInput:
    """InputSource that replays a fixed list of events.

    Fails the test if the dialog reads past the end of the script.
    """

    def __init__(self, events):
        self.events = list(events)
        self.reads = 0

    def read_event(self):
        if self.reads >= len(self.events):
            pytest.fail("dialog read more input than was scripted")
        event = self.events[self.reads]
        self.reads += 1
        return event


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def make_input():
    def _make(*events):
        return ScriptedInput(events)

    return _make
