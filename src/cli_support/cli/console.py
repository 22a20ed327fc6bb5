"""Rich console helpers for the CLI layer.

Consoles are created on demand so that they always target the current
``sys.stderr`` / ``sys.stdout`` (test harnesses swap those streams).
"""

from __future__ import annotations

from rich.console import Console


def get_error_console() -> Console:
	"""Create a Rich console instance targeting stderr."""
	return Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy writing to stderr via Rich."""

	def print(self, *objects: object, markup: bool | None = None) -> None:
		"""Render *objects* on a fresh stderr console."""
		get_error_console().print(*objects, markup=markup)


console = _ConsoleProxy()
