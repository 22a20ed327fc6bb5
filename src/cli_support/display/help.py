"""Help-screen formatting: a usage line, a description and option rows."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OptionEntry:
    """One row of a help screen.

    Names are given without dashes; either may be empty.  ``str()``
    renders the row, e.g. ``"  -o, --output     FILE  Write to FILE"``.
    """

    short: str
    """Single-character name, rendered as ``-s``."""

    long: str
    """Long name, rendered as ``--long``."""

    extra: str
    """Placeholder for the option's value (e.g. ``FILE``), may be empty."""

    description: str

    def __str__(self) -> str:
        if self.short:
            short_part = f"-{self.short}," if self.long else f"-{self.short}"
        else:
            short_part = ""

        if self.long:
            long_part = f"--{self.long:<10} {self.extra}"
        else:
            long_part = f"{'':12}{self.extra}"

        return f"  {short_part:<4}{long_part:<27} {self.description}"


@dataclass(slots=True)
class HelpDisplay:
    """Help screen for a command-line application."""

    usage: str
    description: str
    entries: list[OptionEntry] = field(default_factory=list)

    def add_option(self, entry: OptionEntry) -> None:
        self.entries.append(entry)

    def __str__(self) -> str:
        lines = [f"Usage: {self.usage}\n{self.description}\n\n"]
        lines.extend(f"{entry}\n" for entry in self.entries)
        lines.append("\n")
        return "".join(lines)

    def display(self) -> None:
        """Write the help screen to stdout."""
        print(self, end="")
