"""Interactive single-selection terminal menu.

Renders a list of items with a movable pointer and returns the chosen
item when Enter is pressed.

Example:
    from select_dialog import SelectDialog

    dialog = SelectDialog(["apple", "banana", "cherry"])
    dialog.add_up_key("k").add_down_key("j").pointer("➤")
    fruit = dialog.start()
"""

from .dialog import DialogState, SelectDialog, select
from .errors import ConfigurationError, InputSourceError, SelectDialogError
from .input import InputSource, ReadcharInput
from .keys import (
    CONFIRM_KEY,
    DEFAULT_DOWN_KEY,
    DEFAULT_UP_KEY,
    Action,
    Direction,
    KeyBindings,
    KeyEvent,
    Modifier,
    decode_key,
    is_confirm,
    matches,
)
from .line import Line
from .render import ConsoleTerminal, LineRenderer, Terminal
from .style import DEFAULT_STYLE, SelectStyle, style_from_env

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectDialog",
    "DialogState",
    "select",
    # Keys
    "KeyBindings",
    "KeyEvent",
    "Modifier",
    "Action",
    "Direction",
    "CONFIRM_KEY",
    "DEFAULT_UP_KEY",
    "DEFAULT_DOWN_KEY",
    "is_confirm",
    "matches",
    # Input / output
    "InputSource",
    "ReadcharInput",
    "decode_key",
    "Terminal",
    "ConsoleTerminal",
    "LineRenderer",
    "Line",
    # Styling
    "SelectStyle",
    "DEFAULT_STYLE",
    "style_from_env",
    # Errors
    "SelectDialogError",
    "ConfigurationError",
    "InputSourceError",
]
