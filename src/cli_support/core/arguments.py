"""Tokenization of raw process arguments into options and values.

The tokenizer makes a single left-to-right pass over the arguments and
classifies each element:

* ``--name`` — a long option, recorded verbatim (``--`` alone included).
* ``-x`` — a short option.
* ``-xyz`` — bundled short options, expanded to ``-x``, ``-y``, ``-z``.
* anything else — a *naked value*, attributed to the most recent option.

Naked values are collected until the next option (or the end of the
input) and then committed under the active option.  Values appearing
before any option are committed under the empty-string key.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from cli_support.exceptions import CliError

T = TypeVar("T")

NO_OPTION: str = ""
"""Key under which naked values preceding every option are stored."""


def _convert(value: str, type_: Callable[[str], T]) -> T:
    """Parse *value* with *type_*; ``bool`` only accepts ``true``/``false``."""
    if type_ is bool:
        if value == "true":
            return True  # type: ignore[return-value]
        if value == "false":
            return False  # type: ignore[return-value]
        raise ValueError(f"invalid boolean literal: {value!r}")
    return type_(value)


@dataclass(frozen=True, slots=True)
class Arguments:
    """Immutable view of a tokenized argument list.

    Build one per process with :meth:`from_argv` (or :meth:`build` for an
    explicit list) and query it for the rest of the run.
    """

    options: tuple[str, ...]
    """Every option token in first-seen order, repeats included."""

    option_values: Mapping[str, tuple[str, ...]]
    """Naked values keyed by the option they followed."""

    free_values: tuple[str, ...]
    """Every naked value in input order, whatever option it followed."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, raw_arguments: Iterable[str]) -> Arguments:
        """Tokenize *raw_arguments* (the argument list minus the program name)."""
        options: list[str] = []
        option_values: dict[str, tuple[str, ...]] = {}
        free_values: list[str] = []

        cursor = NO_OPTION
        pending: list[str] = []

        for argument in raw_arguments:
            if not argument.startswith("-"):
                pending.append(argument)
                free_values.append(argument)
                continue

            if pending:
                # A later run under the same key replaces the earlier one.
                option_values[cursor] = tuple(pending)
                pending = []

            if argument.startswith("--") or len(argument) == 2:
                options.append(argument)
                cursor = argument
                continue

            # Bundled short options; a lone "-" yields none.
            for char in argument:
                if char != "-":
                    cursor = f"-{char}"
                    options.append(cursor)

        if pending:
            option_values[cursor] = tuple(pending)

        return cls(
            options=tuple(options),
            option_values=MappingProxyType(option_values),
            free_values=tuple(free_values),
        )

    @classmethod
    def from_argv(cls, argv: list[str] | None = None) -> Arguments:
        """Tokenize *argv*, defaulting to ``sys.argv[1:]``."""
        if argv is None:
            argv = sys.argv[1:]
        return cls.build(argv)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has(self, option: str) -> bool:
        """Return whether *option* was given, with or without values."""
        return option in self.options

    def first_value(self, option: str) -> str | None:
        """Return the first value given to *option*, or ``None``."""
        values = self.option_values.get(option)
        if not values:
            return None
        return values[0]

    def values(self, option: str) -> tuple[str, ...]:
        """Return every value given to *option* (possibly empty)."""
        return self.option_values.get(option, ())

    def parsed(self, option: str, type_: Callable[[str], T] = str) -> T | None:  # type: ignore[assignment]
        """Parse the first value of *option* with *type_*.

        Returns ``None`` when the option is absent, has no value, or the
        value does not parse.
        """
        if not self.has(option):
            return None
        value = self.first_value(option)
        if value is None:
            return None
        try:
            return _convert(value, type_)
        except (ArithmeticError, TypeError, ValueError):
            return None

    def parsed_checked(self, option: str, type_: Callable[[str], T] = str) -> T:  # type: ignore[assignment]
        """Parse the first value of *option* with *type_* or fail loudly.

        Raises
        ------
        CliError
            Fatal, code ``1``, with a distinct message for an absent
            option, an option without a value and an unparsable value.
        """
        if not self.has(option):
            raise CliError.fatal(f"No '{option}' option passed", 1)
        value = self.first_value(option)
        if value is None:
            raise CliError.fatal(f"No argument passed to '{option}'", 1)
        try:
            return _convert(value, type_)
        except (ArithmeticError, TypeError, ValueError) as exc:
            raise CliError.fatal(f"Cannot parse argument to '{option}'", 1) from exc
