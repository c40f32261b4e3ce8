"""Command line entry point for select-dialog."""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from . import __version__
from .dialog import SelectDialog
from .errors import ConfigurationError, InputSourceError
from .render import ConsoleTerminal
from .style import style_from_env


def build_parser() -> argparse.ArgumentParser:
    """Build the select-dialog argument parser."""
    parser = argparse.ArgumentParser(
        prog="select-dialog",
        description="Pick one item interactively and print it to stdout",
    )
    parser.add_argument("--version", action="version", version=f"select-dialog {__version__}")
    parser.add_argument("items", nargs="+", help="Items to choose from")
    parser.add_argument("--pointer", help="Glyph in front of the selected item")
    parser.add_argument("--not-selected-pointer", help="Glyph in front of other items")
    parser.add_argument("--underline", action="store_true", help="Underline the selected item")
    parser.add_argument("--forward", action="store_true", help="Indent the selected item")
    parser.add_argument(
        "--up-key", action="append", default=[], metavar="KEY", help="Extra key to move up"
    )
    parser.add_argument(
        "--down-key", action="append", default=[], metavar="KEY", help="Extra key to move down"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log key handling to stderr")
    return parser


def build_dialog(args: argparse.Namespace) -> SelectDialog[str]:
    """Create a configured dialog from parsed arguments."""
    # stdout carries only the chosen item
    terminal = ConsoleTerminal(Console(stderr=True, highlight=False))
    dialog = SelectDialog(args.items, style=style_from_env(), terminal=terminal)
    if args.pointer:
        dialog.pointer(args.pointer)
    if args.not_selected_pointer:
        dialog.not_selected_pointer(args.not_selected_pointer)
    if args.underline:
        dialog.underline_selected_item()
    if args.forward:
        dialog.move_selected_item_forward()
    for key in args.up_key:
        dialog.add_up_key(key)
    for key in args.down_key:
        dialog.add_down_key(key)
    return dialog


def main(argv: list[str] | None = None) -> None:
    """select-dialog main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        choice = build_dialog(args).start()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except InputSourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        sys.exit(130)

    print(choice)
