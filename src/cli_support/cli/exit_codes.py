"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from cli_support.exceptions import CliError

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""A fatal CliError was handled. User-facing message was displayed."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""


def for_error(error: CliError) -> int:
    """Map a :class:`CliError` code onto a process exit status.

    Codes in ``1..255`` are used verbatim; anything else (including ``0``,
    which would read as success) collapses to :data:`GENERAL_ERROR`.
    """
    if 1 <= error.code <= 255:
        return error.code
    return GENERAL_ERROR
