"""Display style options for select_dialog.

SelectStyle holds the pointer glyphs and the highlight flags applied to
the selected row. Styles are immutable; the dialog swaps in updated copies
while it is being configured.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


def check_glyph(glyph: str) -> str:
    """Validate a pointer glyph (exactly one character)."""
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ConfigurationError(f"Pointer must be a single character, got {glyph!r}")
    return glyph


@dataclass(frozen=True)
class SelectStyle:
    """Visual options for the select dialog.

    Attributes:
        pointer: Glyph shown in front of the selected item.
        not_selected_pointer: Glyph shown in front of every other item
            (blank when None).
        underline_selected: Underline the selected item's text.
        move_selected_forward: Indent the selected item away from the pointer.
        forward_indent: Spaces used when move_selected_forward is set.
    """

    pointer: str = ">"
    not_selected_pointer: str | None = None
    underline_selected: bool = False
    move_selected_forward: bool = False
    forward_indent: int = 1

    def __post_init__(self):
        check_glyph(self.pointer)
        if self.not_selected_pointer is not None:
            check_glyph(self.not_selected_pointer)
        if self.forward_indent < 0:
            raise ConfigurationError("forward_indent must not be negative")


DEFAULT_STYLE = SelectStyle()


def style_from_env(base: SelectStyle = DEFAULT_STYLE) -> SelectStyle:
    """Apply SELECT_DIALOG_* environment overrides to a style.

    Recognized variables:
        SELECT_DIALOG_POINTER: pointer glyph.
        SELECT_DIALOG_NOT_SELECTED_POINTER: glyph for unselected rows.
        SELECT_DIALOG_UNDERLINE: underline the selected item (1/true/yes/on).
        SELECT_DIALOG_FORWARD: indent the selected item (1/true/yes/on).
    """
    changes: dict[str, object] = {}

    pointer = os.environ.get("SELECT_DIALOG_POINTER")
    if pointer:
        changes["pointer"] = pointer

    not_selected = os.environ.get("SELECT_DIALOG_NOT_SELECTED_POINTER")
    if not_selected:
        changes["not_selected_pointer"] = not_selected

    underline = os.environ.get("SELECT_DIALOG_UNDERLINE")
    if underline is not None:
        changes["underline_selected"] = underline.strip().lower() in _TRUTHY

    forward = os.environ.get("SELECT_DIALOG_FORWARD")
    if forward is not None:
        changes["move_selected_forward"] = forward.strip().lower() in _TRUTHY

    return replace(base, **changes) if changes else base
