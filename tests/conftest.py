"""Shared pytest fixtures and configuration for the cli-support test suite.

Guidelines
----------
* Tests never read the real ``sys.argv``; argument lists are explicit.
* Stream output is asserted through ``capsys``.
* ``CliError.app_name`` is pinned so that expected lines are stable.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from cli_support.exceptions import CliError


@pytest.fixture(autouse=True)
def _pin_app_name(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(CliError, "app_name", "cli-support")
    yield
