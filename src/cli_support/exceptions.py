"""Error reporting for cli-support.

Every failure the library surfaces is a :class:`CliError`.  An error is
an ordinary exception value with a severity attached:

Severity
--------
FATAL
    Execution cannot continue.  :meth:`CliError.handle` displays the
    message once, then re-raises the same instance so that it keeps
    travelling up the call chain.
WARNING
    Execution can continue.  :meth:`CliError.handle` displays the
    message and returns normally.

Propagation is explicit: a layer that catches a ``CliError`` either
calls :meth:`~CliError.handle` or one of the ``dismiss*`` methods.
"""

from __future__ import annotations

import enum
from collections.abc import Collection
from typing import ClassVar

from rich.console import Console

from cli_support.version import APP_NAME


class Severity(enum.Enum):
    """How serious a :class:`CliError` is."""

    FATAL = "fatal"
    WARNING = "warning"


class CliError(Exception):
    """Error raised by, and reported through, a command-line application.

    The ``code`` is a caller-defined classification; it is not
    necessarily the process exit status.
    """

    app_name: ClassVar[str] = APP_NAME
    """Name prefixed to every displayed error or warning line."""

    def __init__(self, message: str, code: int, severity: Severity) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: int = code
        self.severity: Severity = severity
        self._reported: bool = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, {self.code!r}, "
            f"{self.severity})"
        )

    @property
    def reported(self) -> bool:
        """``True`` once a fatal error has been displayed to the user."""
        return self._reported

    # --- Factories ---------------------------------------------------------

    @classmethod
    def warn(cls, message: str, code: int) -> CliError:
        """Build a :data:`Severity.WARNING` error, ready to ``raise``."""
        return cls(message, code, Severity.WARNING)

    @classmethod
    def fatal(cls, message: str, code: int) -> CliError:
        """Build a :data:`Severity.FATAL` error, ready to ``raise``."""
        return cls(message, code, Severity.FATAL)

    # --- Handling ----------------------------------------------------------

    def handle(self) -> None:
        """Display the error on stderr and decide whether it propagates.

        Fatal errors are displayed on the first call only and are
        re-raised on every call.  Warnings are displayed on every call
        and never raise.

        Raises
        ------
        CliError
            ``self``, when the severity is :data:`Severity.FATAL`.
        """
        if self.severity is Severity.FATAL:
            if not self._reported:
                self._display("has encountered an error")
                self._reported = True
            raise self

        # Only the fatal branch sets the flag, so warnings repeat.
        if not self._reported:
            self._display("has encountered a warning")

    def _display(self, verb_phrase: str) -> None:
        # Raw write; the line reaches stderr unaltered.
        stream = Console(stderr=True).file
        stream.write(f"{self.app_name} {verb_phrase}: '{self.message}'\n")
        stream.flush()

    # --- Dismissal ---------------------------------------------------------

    def dismiss_by_code(self, code: int) -> None:
        """Drop the error if its code is *code*, otherwise re-raise it."""
        if self.code != code:
            raise self

    def dismiss_by_codes(self, codes: Collection[int]) -> None:
        """Drop the error if its code is one of *codes*, otherwise re-raise it."""
        if self.code not in codes:
            raise self

    def dismiss(self) -> None:
        """Drop the error unconditionally.

        Spelling this out at the call site records that ignoring the
        error was a decision, not an oversight.
        """
