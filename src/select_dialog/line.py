"""Line value type for select_dialog.

A Line is the renderable form of one item: its display text, the pointer
glyph and the style flags derived from the current selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len
from rich.text import Text


@dataclass
class Line:
    """One row of the dialog.

    Rendered as ``<glyph> <indent><text>``.

    Attributes:
        text: Display text of the item.
        pointer: Glyph shown in front of the selected row.
        not_selected_pointer: Glyph shown in front of other rows (blank if None).
        selected: Whether the row is the current selection.
        underlined: Whether the item text is underlined.
        indent: Spaces between the glyph and the text.
    """

    text: str
    pointer: str
    not_selected_pointer: str | None = None
    selected: bool = False
    underlined: bool = False
    indent: int = 0

    def reset(self) -> None:
        """Clear all per-selection style flags."""
        self.selected = False
        self.underlined = False
        self.indent = 0

    def select(self) -> None:
        self.selected = True

    def underline(self) -> None:
        self.underlined = True

    def space_from_pointer(self, spaces: int) -> None:
        self.indent = spaces

    def _glyph(self) -> str:
        if self.selected:
            return self.pointer
        if self.not_selected_pointer is not None:
            return self.not_selected_pointer
        return " " * cell_len(self.pointer)

    def render(self) -> Text:
        """Render this line as Rich Text."""
        line = Text(f"{self._glyph()} {' ' * self.indent}")
        line.append(self.text, style="underline" if self.underlined else None)
        return line

    @property
    def width(self) -> int:
        """Terminal cell width of the rendered line."""
        return self.render().cell_len
