"""ANSI colour and style decoration of plain strings.

Escape sequences are produced by :class:`rich.style.Style` rendered for
the standard 16-colour palette, so the output is the classic
``ESC[<codes>m ... ESC[0m`` form every terminal understands.  Any
decoration already present in the input is removed first, so decorating
twice never stacks codes.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable

from rich.color import ColorSystem
from rich.style import Style

_ESCAPE_RE = re.compile(r"\x1b[^m]*(?:m|$)")


class AnsiColor(enum.Enum):
    """Foreground colours of the 16-colour palette (SGR 30-37, 90-97)."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PURPLE = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_PURPLE = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    @property
    def style(self) -> Style:
        return Style(color=self.value)


class AnsiStyle(enum.Enum):
    """Text attributes (SGR 1, 4 and 9)."""

    BOLD = "bold"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strike"

    @property
    def style(self) -> Style:
        return Style.parse(self.value)


def clear_decoration(s: str) -> str:
    """Remove every escape sequence from *s*.

    A sequence runs from ``ESC`` up to and including the next ``m``; an
    unterminated one swallows the rest of the string.
    """
    return _ESCAPE_RE.sub("", s)


def _render(s: str, style: Style) -> str:
    return style.render(clear_decoration(s), color_system=ColorSystem.STANDARD)


def decorate_color(s: str, color: AnsiColor) -> str:
    """Colour *s* with *color*."""
    return _render(s, color.style)


def decorate_style(s: str, style: AnsiStyle) -> str:
    """Apply the text attribute *style* to *s*."""
    return _render(s, style.style)


def decorate(s: str, color: AnsiColor, style: AnsiStyle) -> str:
    """Colour *s* and apply one text attribute."""
    return _render(s, style.style + color.style)


def decorate_multiple(s: str, color: AnsiColor, styles: Iterable[AnsiStyle]) -> str:
    """Colour *s* and apply any number of text attributes."""
    combined = Style()
    for style in styles:
        combined += style.style
    return _render(s, combined + color.style)
