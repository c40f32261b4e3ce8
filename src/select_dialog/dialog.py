"""Interactive single-selection dialog.

This module provides SelectDialog, which renders a list of items with a
movable pointer, reads key presses until Enter is pressed and returns the
chosen item.

Example:
    from select_dialog import SelectDialog

    choice = (
        SelectDialog(["item1", "item2", "item3"])
        .add_up_key("k")
        .pointer("◉")
        .not_selected_pointer("○")
        .underline_selected_item()
        .start()
    )
"""

from __future__ import annotations

import enum
import logging
from dataclasses import replace
from typing import Any, Callable, Generic, Sequence, TypeVar

from .errors import ConfigurationError
from .input import InputSource, ReadcharInput
from .keys import Action, Direction, KeyBindings
from .line import Line
from .render import ConsoleTerminal, LineRenderer, Terminal
from .style import DEFAULT_STYLE, SelectStyle, check_glyph

logger = logging.getLogger(__name__)

T = TypeVar("T")

SelectionChanged = Callable[[Direction, Any], None]


class DialogState(enum.Enum):
    """Lifecycle of one interactive session."""

    BUILDING = "building"
    RENDERING = "rendering"
    AWAITING_INPUT = "awaiting_input"
    MOVING = "moving"
    CONFIRMED = "confirmed"


class SelectDialog(Generic[T]):
    """Single-selection terminal menu.

    The item sequence is held by reference for the whole session and is
    never modified. All configuration must happen before start(); once the
    session begins, setters raise ConfigurationError.

    Keyboard controls:
        - Up/Down (plus any added keys): move the pointer, stopping at the ends
        - Enter: confirm and return the selected item

    Args:
        items: Items to choose from. Displayed with str().
        style: Initial display style (DEFAULT_STYLE if None).
        terminal: Output target (a ConsoleTerminal on stdout if None).
        input_source: Key source (ReadcharInput if None).
        on_change: Optional observer called as on_change(direction, item)
            after every up/down key press.

    Raises:
        ConfigurationError: If items is empty.
    """

    def __init__(
        self,
        items: Sequence[T],
        *,
        style: SelectStyle | None = None,
        terminal: Terminal | None = None,
        input_source: InputSource | None = None,
        on_change: SelectionChanged | None = None,
    ):
        if len(items) == 0:
            raise ConfigurationError("Select dialog must have at least one item")

        self.items = items
        self.style = style or DEFAULT_STYLE
        self.bindings = KeyBindings()
        self.terminal = terminal or ConsoleTerminal()
        self.input_source = input_source or ReadcharInput()
        self.selection_changed = on_change
        self.lines: list[Line] = []
        self._selected = 0
        self._state = DialogState.BUILDING
        self._started = False

    @property
    def selected_index(self) -> int:
        return self._selected

    @property
    def state(self) -> DialogState:
        return self._state

    def _check_configurable(self) -> None:
        if self._started:
            raise ConfigurationError("Select dialog cannot be configured after start()")

    # Configuration

    def pointer(self, glyph: str) -> SelectDialog[T]:
        """Set the glyph shown in front of the selected item."""
        self._check_configurable()
        self.style = replace(self.style, pointer=check_glyph(glyph))
        return self

    def not_selected_pointer(self, glyph: str) -> SelectDialog[T]:
        """Set the glyph shown in front of every unselected item."""
        self._check_configurable()
        self.style = replace(self.style, not_selected_pointer=check_glyph(glyph))
        return self

    def move_selected_item_forward(self) -> SelectDialog[T]:
        self._check_configurable()
        self.style = replace(self.style, move_selected_forward=True)
        return self

    def underline_selected_item(self) -> SelectDialog[T]:
        self._check_configurable()
        self.style = replace(self.style, underline_selected=True)
        return self

    def set_up_key(self, code: str) -> SelectDialog[T]:
        """Replace the default up key (arrow up)."""
        self._check_configurable()
        self.bindings.set_up_key(code)
        return self

    def set_down_key(self, code: str) -> SelectDialog[T]:
        """Replace the default down key (arrow down)."""
        self._check_configurable()
        self.bindings.set_down_key(code)
        return self

    def add_up_key(self, code: str) -> SelectDialog[T]:
        """Bind an extra key to move up. Enter is rejected."""
        self._check_configurable()
        self.bindings.add_up_key(code)
        return self

    def add_down_key(self, code: str) -> SelectDialog[T]:
        """Bind an extra key to move down. Enter is rejected."""
        self._check_configurable()
        self.bindings.add_down_key(code)
        return self

    def on_selection_changed(self, callback: SelectionChanged | None) -> SelectDialog[T]:
        self._check_configurable()
        self.selection_changed = callback
        return self

    # Session

    def _build_lines(self) -> None:
        self.lines = [
            Line(str(item), self.style.pointer, self.style.not_selected_pointer)
            for item in self.items
        ]

    def _render(self, renderer: LineRenderer) -> None:
        self._state = DialogState.RENDERING
        for line in self.lines:
            line.reset()

        current = self.lines[self._selected]
        current.select()
        if self.style.underline_selected:
            current.underline()
        if self.style.move_selected_forward:
            current.space_from_pointer(self.style.forward_indent)

        renderer.repaint(self.lines)

    def _move(self, direction: Direction, renderer: LineRenderer) -> None:
        self._state = DialogState.MOVING
        if direction is Direction.UP and self._selected > 0:
            self._selected -= 1
        elif direction is Direction.DOWN and self._selected < len(self.items) - 1:
            self._selected += 1

        self._render(renderer)

        if self.selection_changed is not None:
            self.selection_changed(direction, self.items[self._selected])

    def start(self) -> T:
        """Run the interactive session and block until Enter is pressed.

        Returns:
            The item under the pointer when Enter was pressed.

        Raises:
            ConfigurationError: If the dialog was already started.
            InputSourceError: If reading from the terminal fails.
        """
        if self._started:
            raise ConfigurationError("Select dialog can only be started once")
        self._started = True

        logger.debug("Starting select dialog with %d items", len(self.items))
        renderer = LineRenderer(self.terminal)
        self._build_lines()
        self._render(renderer)

        while True:
            self._state = DialogState.AWAITING_INPUT
            event = self.input_source.read_event()
            action = self.bindings.classify(event)
            logger.debug("Key %s classified as %s", event, action)

            if action is Action.CONFIRM:
                break
            if action is Action.UP:
                self._move(Direction.UP, renderer)
            elif action is Action.DOWN:
                self._move(Direction.DOWN, renderer)

        self._state = DialogState.CONFIRMED
        logger.debug("Confirmed item at index %d", self._selected)
        return self.items[self._selected]


def select(
    items: Sequence[T],
    *,
    up_keys: Sequence[str] = (),
    down_keys: Sequence[str] = (),
    **kwargs: Any,
) -> T:
    """Show a select dialog and return the chosen item.

    Args:
        items: Items to choose from.
        up_keys: Extra keys that move the pointer up.
        down_keys: Extra keys that move the pointer down.
        **kwargs: Passed through to SelectDialog.
    """
    dialog = SelectDialog(items, **kwargs)
    for code in up_keys:
        dialog.add_up_key(code)
    for code in down_keys:
        dialog.add_down_key(code)
    return dialog.start()
