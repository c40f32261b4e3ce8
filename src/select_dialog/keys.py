"""Key bindings for select_dialog.

This module provides the key event type, helper functions for matching
key presses, decoding of raw readchar keys, and the KeyBindings resolver
that classifies an event as confirm, up or down.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

import readchar

from .errors import ConfigurationError

CONFIRM_KEY = readchar.key.ENTER
DEFAULT_UP_KEY = readchar.key.UP
DEFAULT_DOWN_KEY = readchar.key.DOWN

# xterm reports modified keys as ESC [ <n> ; <mod> <final>
_MODIFIED_CSI = re.compile(r"^\x1b\[(\d+);(\d+)([A-Z~])$")

# Control characters that are keys of their own rather than Ctrl+letter
_PLAIN_CONTROL = {"\t", "\r", "\n", "\x08"}


class Modifier(enum.Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CTRL = enum.auto()
    ALT = enum.auto()


class Action(enum.Enum):
    """What a key press means to the dialog."""

    CONFIRM = "confirm"
    UP = "up"
    DOWN = "down"


class Direction(enum.Enum):
    """Direction tag passed to selection change callbacks."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    Attributes:
        code: Key code as produced by readchar (e.g. readchar.key.UP or "k").
        modifiers: Modifier keys held during the press.
    """

    code: str
    modifiers: Modifier = Modifier.NONE


def normalize_code(code: str) -> str:
    """Map terminal variations of a key code onto one canonical code."""
    if code in ("\r", "\n", readchar.key.ENTER):
        return CONFIRM_KEY
    return code


def _xterm_modifiers(param: int) -> Modifier:
    bits = param - 1
    modifiers = Modifier.NONE
    if bits & 1:
        modifiers |= Modifier.SHIFT
    if bits & 2:
        modifiers |= Modifier.ALT
    if bits & 4:
        modifiers |= Modifier.CTRL
    return modifiers


def decode_key(key: str) -> KeyEvent:
    """Decode a readchar key string into a KeyEvent.

    Args:
        key: Raw string returned by readchar.readkey().

    Returns:
        KeyEvent with the base code and any modifiers that were encoded
        in the key string.
    """
    match = _MODIFIED_CSI.match(key)
    if match:
        number, param, final = match.groups()
        # ESC [ 1 ; 5 A is Ctrl+Up (ESC [ A), ESC [ 6 ; 5 ~ is Ctrl+PageDown (ESC [ 6 ~)
        code = f"\x1b[{number}~" if final == "~" else f"\x1b[{final}"
        return KeyEvent(code, _xterm_modifiers(int(param)))

    if len(key) == 1:
        if "\x01" <= key <= "\x1a" and key not in _PLAIN_CONTROL:
            return KeyEvent(chr(ord(key) + 96), Modifier.CTRL)
        if key.isalpha() and key.isupper():
            return KeyEvent(key, Modifier.SHIFT)
        return KeyEvent(normalize_code(key))

    if len(key) == 2 and key[0] == "\x1b" and key[1].isprintable():
        inner = decode_key(key[1])
        return KeyEvent(inner.code, inner.modifiers | Modifier.ALT)

    return KeyEvent(normalize_code(key))


def matches(event: KeyEvent, code: str) -> bool:
    """Check if event is exactly code with no modifiers held."""
    return event.modifiers == Modifier.NONE and normalize_code(event.code) == normalize_code(code)


def is_confirm(event: KeyEvent) -> bool:
    """Check if event is the confirm key (Enter without modifiers)."""
    return matches(event, CONFIRM_KEY)


def _check_movement_key(code: str) -> str:
    if not isinstance(code, str) or not code:
        raise ConfigurationError(f"Invalid key code: {code!r}")
    code = normalize_code(code)
    if code == CONFIRM_KEY:
        raise ConfigurationError("Enter key is not supported as up/down key")
    if decode_key(code).modifiers != Modifier.NONE:
        raise ConfigurationError(
            f"Key {code!r} always arrives with a modifier held and can never match"
        )
    return code


class KeyBindings:
    """Sets of key codes that move the selection up or down.

    Each direction has one default code (arrow up / arrow down) that can be
    overridden, plus any number of extra codes. The confirm key is fixed
    and can never be bound to a movement.
    """

    def __init__(self, up: str = DEFAULT_UP_KEY, down: str = DEFAULT_DOWN_KEY):
        self._default_up = _check_movement_key(up)
        self._default_down = _check_movement_key(down)
        self._extra_up: list[str] = []
        self._extra_down: list[str] = []

    @property
    def up_keys(self) -> list[str]:
        """Up codes in match order, default first."""
        return [self._default_up, *self._extra_up]

    @property
    def down_keys(self) -> list[str]:
        """Down codes in match order, default first."""
        return [self._default_down, *self._extra_down]

    def set_up_key(self, code: str) -> None:
        self._default_up = _check_movement_key(code)

    def set_down_key(self, code: str) -> None:
        self._default_down = _check_movement_key(code)

    def add_up_key(self, code: str) -> None:
        code = _check_movement_key(code)
        if code not in self._extra_up:
            self._extra_up.append(code)

    def add_down_key(self, code: str) -> None:
        code = _check_movement_key(code)
        if code not in self._extra_down:
            self._extra_down.append(code)

    def is_up(self, event: KeyEvent) -> bool:
        """Check if event matches any up binding."""
        return any(matches(event, code) for code in self.up_keys)

    def is_down(self, event: KeyEvent) -> bool:
        """Check if event matches any down binding."""
        return any(matches(event, code) for code in self.down_keys)

    def classify(self, event: KeyEvent) -> Action | None:
        """Resolve event to an Action, or None if the key is not bound.

        Confirm is checked first, then up, then down.
        """
        if is_confirm(event):
            return Action.CONFIRM
        if self.is_up(event):
            return Action.UP
        if self.is_down(event):
            return Action.DOWN
        return None
