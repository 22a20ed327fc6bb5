"""Core layer — pure argument tokenization.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``display``.
"""

from cli_support.core.arguments import NO_OPTION, Arguments

__all__: list[str] = [
    "NO_OPTION",
    "Arguments",
]
