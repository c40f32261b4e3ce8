"""Exceptions raised by select_dialog."""


class SelectDialogError(Exception):
    """Base class for all select dialog errors."""


class ConfigurationError(SelectDialogError, ValueError):
    """Raised when a dialog is configured with invalid options.

    Covers an empty item list, binding the confirm key to a movement,
    invalid pointer glyphs and changing options after the session started.
    """


class InputSourceError(SelectDialogError):
    """Raised when the terminal input source fails to deliver a key."""
