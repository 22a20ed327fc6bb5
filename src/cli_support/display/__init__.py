"""Display layer — plain-string producers for console output.

Nothing here knows about argument tokenization or error handling; every
helper takes and returns ordinary strings.
"""

from cli_support.display.decoration import (
    AnsiColor,
    AnsiStyle,
    clear_decoration,
    decorate,
    decorate_color,
    decorate_multiple,
    decorate_style,
)
from cli_support.display.grid import GridDisplay
from cli_support.display.help import HelpDisplay, OptionEntry

__all__: list[str] = [
    "AnsiColor",
    "AnsiStyle",
    "GridDisplay",
    "HelpDisplay",
    "OptionEntry",
    "clear_decoration",
    "decorate",
    "decorate_color",
    "decorate_multiple",
    "decorate_style",
]
