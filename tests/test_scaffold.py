"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest

from stardate_cli import __version__
from stardate_cli.cli import exit_codes
from stardate_cli.exceptions import (
    ConfigError,
    ConfigWriteError,
    EnvironmentError,
    InvalidArgumentError,
    InvalidDateError,
    StardateCliError,
    StardateRangeError,
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


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidDateError,
            InvalidArgumentError,
            StardateRangeError,
            ConfigError,
            ConfigWriteError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[StardateCliError]
    ) -> None:
        assert issubclass(exc_class, StardateCliError)

    def test_write_error_is_config_error(self) -> None:
        assert issubclass(ConfigWriteError, ConfigError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(StardateCliError, Exception)

    def test_hint_is_stored(self) -> None:
        err = StardateCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = StardateCliError("boom")
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


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

class TestModuleEntryPoint:
    def test_python_m_delegates_to_cli(self) -> None:
        with patch("stardate_cli.cli.app.cli") as mock_cli:
            runpy.run_module("stardate_cli", run_name="__main__")
        mock_cli.assert_called_once_with()
