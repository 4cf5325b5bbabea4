"""Smoke tests — package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined and distinct.
"""

from __future__ import annotations

import pytest

import css_forge
from css_forge import __version__
from css_forge.cli import exit_codes
from css_forge.cli.app import main
from css_forge.exceptions import (
    CompositionCancelledError,
    CssForgeError,
    DuplicateSingularPartError,
    EnvironmentError,
    InvalidCombinatorError,
    OrderViolationError,
    PrototypeMismatchError,
    SelectorError,
)


# ---------------------------------------------------------------------------
# Version and public surface
# ---------------------------------------------------------------------------

class TestPackage:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_public_names_exported(self) -> None:
        for name in css_forge.__all__:
            assert hasattr(css_forge, name), name

    def test_top_level_round_trip(self) -> None:
        shape = css_forge.json_decode(
            css_forge.Rectangle, css_forge.json_encode(css_forge.rectangle(6, 7)),
        )
        assert shape.area() == 42
        assert css_forge.css_selector_builder.class_("a").class_("b").render() == ".a.b"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [DuplicateSingularPartError, OrderViolationError, InvalidCombinatorError],
    )
    def test_selector_errors(self, exc_class: type[CssForgeError]) -> None:
        assert issubclass(exc_class, SelectorError)

    @pytest.mark.parametrize(
        "exc_class",
        [SelectorError, PrototypeMismatchError, CompositionCancelledError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[CssForgeError]) -> None:
        assert issubclass(exc_class, CssForgeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(CssForgeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = CssForgeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert CssForgeError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.SELECTOR_ERROR == 3
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "build" in capsys.readouterr().out

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_command_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["paint"])
        assert exc_info.value.code == 2

    def test_verbose_flag_accepted(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-v", "build", "-e", "a"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "a"
