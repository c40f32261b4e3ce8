"""Tests for display style options."""

import pytest

from select_dialog.errors import ConfigurationError
from select_dialog.style import DEFAULT_STYLE, SelectStyle, style_from_env


def test_default_style():
    assert DEFAULT_STYLE.pointer == ">"
    assert DEFAULT_STYLE.not_selected_pointer is None
    assert not DEFAULT_STYLE.underline_selected
    assert not DEFAULT_STYLE.move_selected_forward


@pytest.mark.parametrize("glyph", ["", ">>"])
def test_pointer_must_be_single_character(glyph):
    with pytest.raises(ConfigurationError):
        SelectStyle(pointer=glyph)


def test_negative_indent_rejected():
    with pytest.raises(ConfigurationError):
        SelectStyle(forward_indent=-1)


def test_style_from_env_without_overrides_returns_base(monkeypatch):
    for name in (
        "SELECT_DIALOG_POINTER",
        "SELECT_DIALOG_NOT_SELECTED_POINTER",
        "SELECT_DIALOG_UNDERLINE",
        "SELECT_DIALOG_FORWARD",
    ):
        monkeypatch.delenv(name, raising=False)
    assert style_from_env() is DEFAULT_STYLE


def test_style_from_env_honors_overrides(monkeypatch):
    monkeypatch.setenv("SELECT_DIALOG_POINTER", "◉")
    monkeypatch.setenv("SELECT_DIALOG_NOT_SELECTED_POINTER", "○")
    monkeypatch.setenv("SELECT_DIALOG_UNDERLINE", "yes")
    monkeypatch.setenv("SELECT_DIALOG_FORWARD", "0")
    style = style_from_env()
    assert style.pointer == "◉"
    assert style.not_selected_pointer == "○"
    assert style.underline_selected
    assert not style.move_selected_forward


def test_style_from_env_rejects_bad_pointer(monkeypatch):
    monkeypatch.setenv("SELECT_DIALOG_POINTER", "->")
    with pytest.raises(ConfigurationError):
        style_from_env()
