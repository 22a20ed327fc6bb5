"""cli-support — small building blocks for command-line applications.

Tokenizes raw process arguments, reports recoverable and fatal errors
exactly once, and renders grids and help screens with ANSI decoration.
"""

from cli_support.core.arguments import Arguments
from cli_support.display import (
    AnsiColor,
    AnsiStyle,
    GridDisplay,
    HelpDisplay,
    OptionEntry,
    clear_decoration,
    decorate,
    decorate_color,
    decorate_multiple,
    decorate_style,
)
from cli_support.exceptions import CliError, Severity
from cli_support.version import __version__

__all__: list[str] = [
    "AnsiColor",
    "AnsiStyle",
    "Arguments",
    "CliError",
    "GridDisplay",
    "HelpDisplay",
    "OptionEntry",
    "Severity",
    "__version__",
    "clear_decoration",
    "decorate",
    "decorate_color",
    "decorate_multiple",
    "decorate_style",
]
