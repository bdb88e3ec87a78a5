"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from threexd import __version__
from threexd.cli import exit_codes
from threexd.cli.app import main
from threexd.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    EnvironmentError,
    ThreexdError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert f"3xd {__version__}" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [ConfigError, ConfigReadError, ConfigParseError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ThreexdError]
    ) -> None:
        assert issubclass(exc_class, ThreexdError)

    @pytest.mark.parametrize("exc_class", [ConfigReadError, ConfigParseError])
    def test_config_failures_share_a_base(self, exc_class: type[ThreexdError]) -> None:
        assert issubclass(exc_class, ConfigError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ThreexdError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ThreexdError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ThreexdError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
