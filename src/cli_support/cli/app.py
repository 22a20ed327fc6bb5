"""CLI application entry point for cli-support.

``cli-support`` is an argument inspector: it tokenizes its own command
line with :class:`~cli_support.core.arguments.Arguments` and shows which
values were attributed to which option.  It is the library's reference
consumer and exercises every public piece of it.

This module is the **sole error boundary** for the application.  It
handles :class:`~cli_support.exceptions.CliError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, and is the only place that translates
an error into an OS process exit code.
"""

from __future__ import annotations

import sys

from cli_support.cli import exit_codes
from cli_support.cli.console import console
from cli_support.core.arguments import NO_OPTION, Arguments
from cli_support.display import (
    AnsiColor,
    AnsiStyle,
    GridDisplay,
    HelpDisplay,
    OptionEntry,
    decorate,
)
from cli_support.exceptions import CliError
from cli_support.version import APP_NAME, __version__

INVALID_LIMIT: int = 3
"""Warning code for a ``--limit`` that cannot be honoured."""

NO_OPTION_LABEL: str = "(none)"


# ---------------------------------------------------------------------------
# Help screen
# ---------------------------------------------------------------------------

def _build_help() -> HelpDisplay:
    help_display = HelpDisplay(
        usage=f"{APP_NAME} [OPTIONS] [ARGUMENTS...]",
        description="Show how command-line arguments are split into options and values.",
    )
    help_display.add_option(OptionEntry("h", "help", "", "Show this help and exit"))
    help_display.add_option(OptionEntry("V", "version", "", "Show the version and exit"))
    help_display.add_option(OptionEntry("l", "limit", "N", "Show at most N values per option"))
    help_display.add_option(OptionEntry("", "no-color", "", "Never decorate the output"))
    return help_display


# ---------------------------------------------------------------------------
# Option helpers
# ---------------------------------------------------------------------------

def _given(arguments: Arguments, *spellings: str) -> str | None:
    """Return the first of *spellings* present on the command line."""
    for spelling in spellings:
        if arguments.has(spelling):
            return spelling
    return None


def _read_limit(arguments: Arguments) -> int | None:
    """Extract ``--limit``/``-l``; a non-positive limit is warned about and ignored.

    Raises
    ------
    CliError
        Fatal, when the option is given without a value or with a value
        that is not an integer.
    """
    option = _given(arguments, "--limit", "-l")
    if option is None:
        return None

    limit = arguments.parsed_checked(option, int)
    if limit < 1:
        CliError.warn(f"Ignoring non-positive limit {limit}", INVALID_LIMIT).handle()
        return None
    return limit


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _build_grid(arguments: Arguments, limit: int | None, color: bool) -> GridDisplay:
    """Tabulate each distinct option with the values attributed to it."""
    headers = ["Option", "Values"]
    if color:
        headers = [decorate(header, AnsiColor.CYAN, AnsiStyle.BOLD) for header in headers]
    grid = GridDisplay(headers)

    keys = list(dict.fromkeys(arguments.options))
    if NO_OPTION in arguments.option_values:
        keys.insert(0, NO_OPTION)

    for key in keys:
        values = arguments.values(key)
        if limit is not None:
            values = values[:limit]
        grid.add_row([key or NO_OPTION_LABEL, " ".join(values)])
    return grid


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cli-support argument inspector.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CliError
        A fatal error that has already been displayed.
    """
    arguments = Arguments.from_argv(argv)

    if _given(arguments, "--help", "-h"):
        _build_help().display()
        return exit_codes.SUCCESS

    if _given(arguments, "--version", "-V"):
        print(f"{APP_NAME} {__version__}")
        return exit_codes.SUCCESS

    limit: int | None = None
    try:
        limit = _read_limit(arguments)
    except CliError as err:
        err.handle()

    color = sys.stdout.isatty() and not arguments.has("--no-color")
    _build_grid(arguments, limit, color).display()
    print(f"Free values: {' '.join(arguments.free_values)}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
    except CliError as exc:
        try:
            exc.handle()
        except CliError:
            sys.exit(exit_codes.for_error(exc))
        # A warning that reached the boundary does not stop the process.
        code = exit_codes.SUCCESS
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    sys.exit(code)
