"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from immutable_id import __version__
from immutable_id.cli import exit_codes
from immutable_id.cli.app import main
from immutable_id.exceptions import (
    EnvironmentError,
    ImmutableIdError,
    InvalidInputError,
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
    @pytest.mark.parametrize("exc_class", [InvalidInputError, EnvironmentError])
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ImmutableIdError]
    ) -> None:
        assert issubclass(exc_class, ImmutableIdError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(ImmutableIdError, Exception)

    def test_hint_is_stored(self) -> None:
        err = ImmutableIdError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ImmutableIdError("boom")
        assert err.hint is None

    def test_invalid_input_defaults(self) -> None:
        err = InvalidInputError("bad")
        assert err.value is None
        assert err.position is None

    def test_at_annotates_position(self) -> None:
        err = InvalidInputError("bad", value="x", hint="h").at(3)
        assert err.position == 3
        assert err.value == "x"
        assert err.hint == "h"
        assert str(err) == "Item 4: bad"


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
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "to-immutable-id" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_exits_2(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2
