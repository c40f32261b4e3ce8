"""Tests for Line rendering."""

from select_dialog.line import Line


def test_unselected_line_has_blank_pointer():
    assert Line("apple", ">").render().plain == "  apple"


def test_selected_line_shows_pointer():
    line = Line("apple", ">")
    line.select()
    assert line.render().plain == "> apple"


def test_not_selected_pointer_used_for_other_rows():
    line = Line("apple", "◉", not_selected_pointer="○")
    assert line.render().plain == "○ apple"
    line.select()
    assert line.render().plain == "◉ apple"


def test_indent_moves_text_forward():
    line = Line("apple", ">")
    line.select()
    line.space_from_pointer(1)
    assert line.render().plain == ">  apple"


def test_underline_applies_to_text_only():
    line = Line("apple", ">")
    line.select()
    line.underline()
    rendered = line.render()
    assert [str(span.style) for span in rendered.spans] == ["underline"]
    span = rendered.spans[0]
    assert rendered.plain[span.start : span.end] == "apple"


def test_reset_clears_flags():
    line = Line("apple", ">", selected=True, underlined=True, indent=2)
    line.reset()
    assert (line.selected, line.underlined, line.indent) == (False, False, 0)
    assert not line.render().spans


def test_width_counts_wide_characters():
    assert Line("日本", ">").width == 6
