"""Tests for the error reporter (exceptions.py).

Covers construction, the report-once lifecycle of fatal errors, the
always-displayed warning quirk, and code-based dismissal.
"""

from __future__ import annotations

import pytest

from cli_support.exceptions import CliError, Severity

ERROR_LINE = "cli-support has encountered an error: 'disk full'\n"
WARNING_LINE = "cli-support has encountered a warning: 'low disk'\n"


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_fields_accessible(self) -> None:
        err = CliError("disk full", 5, Severity.FATAL)
        assert err.message == "disk full"
        assert err.code == 5
        assert err.severity is Severity.FATAL
        assert str(err) == "disk full"

    def test_not_reported_initially(self) -> None:
        assert CliError("disk full", 5, Severity.FATAL).reported is False

    def test_is_exception(self) -> None:
        assert issubclass(CliError, Exception)

    def test_warn_factory(self) -> None:
        err = CliError.warn("low disk", 2)
        assert err.severity is Severity.WARNING
        assert err.code == 2
        assert not err.reported

    def test_fatal_factory(self) -> None:
        err = CliError.fatal("disk full", 3)
        assert err.severity is Severity.FATAL
        assert err.code == 3
        assert not err.reported

    def test_factories_are_raisable(self) -> None:
        with pytest.raises(CliError, match="disk full"):
            raise CliError.fatal("disk full", 3)

    def test_repr(self) -> None:
        assert repr(CliError.warn("low disk", 2)) == (
            "CliError('low disk', 2, Severity.WARNING)"
        )


# ---------------------------------------------------------------------------
# handle()
# ---------------------------------------------------------------------------

class TestHandleFatal:
    def test_displays_and_reraises(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = CliError.fatal("disk full", 1)
        with pytest.raises(CliError) as exc_info:
            err.handle()
        assert exc_info.value is err
        assert err.reported
        assert capsys.readouterr().err == ERROR_LINE

    def test_displayed_once_across_calls(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        err = CliError.fatal("disk full", 1)
        for _ in range(2):
            with pytest.raises(CliError):
                err.handle()
        assert capsys.readouterr().err == ERROR_LINE

    def test_propagates_through_layers(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        def inner() -> None:
            raise CliError.fatal("disk full", 1)

        def middle() -> None:
            try:
                inner()
            except CliError as err:
                err.handle()

        with pytest.raises(CliError) as exc_info:
            try:
                middle()
            except CliError as err:
                err.handle()

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.count("has encountered an error") == 1

    def test_nothing_on_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(CliError):
            CliError.fatal("disk full", 1).handle()
        assert capsys.readouterr().out == ""

    def test_message_is_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(CliError):
            CliError.fatal("[bold]x[/bold] :smile:", 1).handle()
        assert capsys.readouterr().err == (
            "cli-support has encountered an error: '[bold]x[/bold] :smile:'\n"
        )

    @pytest.mark.parametrize("message", ["a\tb", "a\rb", "bell\x07", "  padded  "])
    def test_message_written_verbatim(
        self, message: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(CliError):
            CliError.fatal(message, 1).handle()
        assert capsys.readouterr().err == (
            f"cli-support has encountered an error: '{message}'\n"
        )

    def test_warning_written_verbatim(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        CliError.warn("col1\tcol2\r", 2).handle()
        assert capsys.readouterr().err == (
            "cli-support has encountered a warning: 'col1\tcol2\r'\n"
        )

    def test_custom_app_name(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(CliError, "app_name", "mytool")
        with pytest.raises(CliError):
            CliError.fatal("disk full", 1).handle()
        assert capsys.readouterr().err.startswith("mytool has encountered an error")


class TestHandleWarning:
    def test_displays_and_returns(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = CliError.warn("low disk", 2)
        assert err.handle() is None
        assert capsys.readouterr().err == WARNING_LINE

    def test_displayed_on_every_call(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        err = CliError.warn("low disk", 2)
        err.handle()
        err.handle()
        assert capsys.readouterr().err == WARNING_LINE * 2

    def test_never_marked_reported(self) -> None:
        err = CliError.warn("low disk", 2)
        err.handle()
        assert not err.reported


# ---------------------------------------------------------------------------
# Dismissal
# ---------------------------------------------------------------------------

class TestDismiss:
    def test_by_matching_code(self) -> None:
        assert CliError.fatal("x", 4).dismiss_by_code(4) is None

    def test_by_other_code_reraises(self) -> None:
        err = CliError.fatal("x", 4)
        with pytest.raises(CliError) as exc_info:
            err.dismiss_by_code(5)
        assert exc_info.value is err

    @pytest.mark.parametrize("codes", [{1, 4}, [4], (2, 3, 4), frozenset({4})])
    def test_by_codes_member(self, codes: object) -> None:
        assert CliError.warn("x", 4).dismiss_by_codes(codes) is None  # type: ignore[arg-type]

    @pytest.mark.parametrize("codes", [set(), {1, 2}, [3]])
    def test_by_codes_non_member_reraises(self, codes: object) -> None:
        with pytest.raises(CliError):
            CliError.warn("x", 4).dismiss_by_codes(codes)  # type: ignore[arg-type]

    @pytest.mark.parametrize("severity", list(Severity))
    def test_dismiss_always_succeeds(self, severity: Severity) -> None:
        assert CliError("x", 9, severity).dismiss() is None

    def test_dismiss_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        CliError.fatal("x", 4).dismiss_by_code(4)
        CliError.fatal("x", 4).dismiss()
        assert capsys.readouterr().err == ""
