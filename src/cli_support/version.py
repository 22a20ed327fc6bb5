"""Packaging-level constants for cli-support."""

from __future__ import annotations

__version__: str = "0.1.0"

APP_NAME: str = "cli-support"
"""Application name prefixed to every reported error or warning."""
