"""Terminal input for select_dialog.

readchar owns raw mode: each readkey() call switches the terminal into raw
mode, reads one key press and restores the previous mode. This module
turns the raw key strings into KeyEvent values.
"""

from __future__ import annotations

import logging
from typing import Protocol

import readchar

from .errors import InputSourceError
from .keys import KeyEvent, decode_key

logger = logging.getLogger(__name__)

__all__ = ["InputSource", "ReadcharInput", "decode_key"]


class InputSource(Protocol):
    """Blocking source of key events."""

    def read_event(self) -> KeyEvent: ...


def _is_csi_final(char: str) -> bool:
    return "\x40" <= char <= "\x7e"


class ReadcharInput:
    """InputSource backed by readchar.

    Ctrl+C surfaces as KeyboardInterrupt (readchar raises it); any other
    failure of the underlying read is wrapped in InputSourceError.
    """

    def read_event(self) -> KeyEvent:
        try:
            key = readchar.readkey()
            if key.startswith("\x1b[") and key.endswith(";"):
                # readkey() stops inside modified keys such as ESC [ 6 ; 5 ~,
                # the parameters and final byte are still buffered
                while not _is_csi_final(key[-1]):
                    char = readchar.readchar()
                    if not char:
                        raise EOFError(f"Input ended inside key sequence {key!r}")
                    key += char
        except KeyboardInterrupt:
            raise
        except Exception as e:
            raise InputSourceError(f"Failed to read key from terminal: {e}") from e

        event = decode_key(key)
        logger.debug("Read key %r as %s", key, event)
        return event
