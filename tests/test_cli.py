"""Tests for the select-dialog command line."""

import pytest

from select_dialog import cli
from select_dialog.keys import KeyEvent


class TestArgParsing:
    def setup_method(self):
        self.parser = cli.build_parser()

    def test_items_required(self):
        with pytest.raises(SystemExit):
            self.parser.parse_args([])

    def test_defaults(self):
        args = self.parser.parse_args(["a", "b"])
        assert args.items == ["a", "b"]
        assert args.up_key == []
        assert args.underline is False

    def test_repeatable_keys(self):
        args = self.parser.parse_args(["a", "--up-key", "k", "--up-key", "w", "--down-key", "j"])
        assert args.up_key == ["k", "w"]
        assert args.down_key == ["j"]


class TestBuildDialog:
    def test_options_applied(self, monkeypatch):
        monkeypatch.delenv("SELECT_DIALOG_POINTER", raising=False)
        args = cli.build_parser().parse_args(
            ["a", "b", "--pointer", "*", "--underline", "--forward", "--down-key", "j"]
        )
        dialog = cli.build_dialog(args)
        assert dialog.style.pointer == "*"
        assert dialog.style.underline_selected
        assert dialog.style.move_selected_forward
        assert "j" in dialog.bindings.down_keys


class TestMain:
    def test_prints_choice(self, monkeypatch, capsys, terminal, make_input):
        source = make_input(KeyEvent("j"), KeyEvent("\r"))
        original = cli.build_dialog

        def _build(args):
            dialog = original(args)
            dialog.terminal = terminal
            dialog.input_source = source
            return dialog

        monkeypatch.setattr(cli, "build_dialog", _build)
        cli.main(["a", "b", "--down-key", "j"])
        assert capsys.readouterr().out == "b\n"

    def test_confirm_key_binding_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["a", "--up-key", "\r"])
        assert exc_info.value.code == 2
        assert "Enter key" in capsys.readouterr().err

    def test_uppercase_key_binding_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["a", "--up-key", "K"])
        assert exc_info.value.code == 2
        assert "modifier" in capsys.readouterr().err

    def test_keyboard_interrupt_exits_130(self, monkeypatch):
        class _Interrupted:
            def start(self):
                raise KeyboardInterrupt

        monkeypatch.setattr(cli, "build_dialog", lambda args: _Interrupted())
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["a"])
        assert exc_info.value.code == 130
