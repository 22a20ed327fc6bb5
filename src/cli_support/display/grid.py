"""Column-aligned grid rendering for console output."""

from __future__ import annotations

from collections.abc import Sequence

from rich.cells import cell_len
from rich.table import Table
from rich.text import Text

from cli_support.display.decoration import clear_decoration

COLUMN_GAP: int = 2
"""Spaces appended after the widest cell of every column."""


def _visible_width(cell: str) -> int:
    """Width of *cell* on screen, ignoring escape sequences."""
    return cell_len(clear_decoration(cell))


def _pad(cell: str, width: int) -> str:
    return cell + " " * (width - _visible_width(cell))


class GridDisplay:
    """Rows of strings laid out in left-aligned columns.

    Rows may have different lengths; each column is as wide as its
    widest visible cell plus :data:`COLUMN_GAP`.  Cells may carry ANSI
    decoration, which does not count towards the width.
    """

    def __init__(self, headers: Sequence[str] | None = None) -> None:
        self._headers: list[str] | None = list(headers) if headers is not None else None
        self._rows: list[list[str]] = []

    @classmethod
    def empty(cls) -> GridDisplay:
        """Create a grid with neither headers nor rows."""
        return cls()

    @property
    def headers(self) -> tuple[str, ...] | None:
        return tuple(self._headers) if self._headers is not None else None

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def set_header(self, headers: Sequence[str]) -> None:
        self._headers = list(headers)

    def add_row(self, row: Sequence[str]) -> None:
        self._rows.append(list(row))

    def _column_widths(self) -> list[int]:
        widths: list[int] = []
        if self._headers is not None:
            widths = [_visible_width(header) for header in self._headers]
        elif self._rows:
            widths = [_visible_width(cell) for cell in self._rows[0]]

        for row in self._rows:
            for index, cell in enumerate(row):
                width = _visible_width(cell)
                if index >= len(widths):
                    widths.append(width)
                elif width > widths[index]:
                    widths[index] = width
        return widths

    def render(self) -> str:
        """Render the grid, one ``\\n``-terminated line per row."""
        widths = self._column_widths()
        lines: list[str] = []
        if self._headers is not None:
            lines.append(self._render_line(self._headers, widths))
        for row in self._rows:
            lines.append(self._render_line(row, widths))
        return "".join(lines)

    @staticmethod
    def _render_line(cells: Sequence[str], widths: Sequence[int]) -> str:
        return "".join(
            _pad(cell, widths[index] + COLUMN_GAP)
            for index, cell in enumerate(cells)
        ) + "\n"

    def as_table(self) -> Table:
        """Build an equivalent borderless :class:`rich.table.Table`.

        Decorated cells are converted to styled :class:`rich.text.Text`
        and missing cells of ragged rows are left blank.
        """
        column_count = len(self._column_widths())
        table = Table(
            show_header=self._headers is not None,
            box=None,
            pad_edge=False,
            padding=(0, COLUMN_GAP, 0, 0),
        )
        headers = self._headers or []
        for index in range(column_count):
            header = headers[index] if index < len(headers) else ""
            table.add_column(Text.from_ansi(header), justify="left")
        for row in self._rows:
            table.add_row(*(Text.from_ansi(cell) for cell in row))
        return table

    def display(self) -> None:
        """Write the rendered grid to stdout."""
        print(self.render(), end="")
