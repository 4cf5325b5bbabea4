"""Tests for environment-driven settings (config.py)."""

from __future__ import annotations

import logging

import pytest

from css_forge.config import DEFAULT_COMBINATOR_VAR, LOG_LEVEL_VAR, CssForgeConfig
from css_forge.core.models import Combinator
from css_forge.exceptions import CssForgeError, InvalidCombinatorError


class TestDefaults:
    def test_defaults(self) -> None:
        config = CssForgeConfig()
        assert config.log_level == "WARNING"
        assert config.default_combinator is Combinator.DESCENDANT
        assert config.default_combinator.value == " "

    def test_empty_environment_gives_defaults(self) -> None:
        assert CssForgeConfig.from_env({}) == CssForgeConfig()

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CssForgeConfig().log_level = "DEBUG"  # type: ignore[misc]


class TestFromEnv:
    def test_log_level_normalised(self) -> None:
        config = CssForgeConfig.from_env({LOG_LEVEL_VAR: " debug "})
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_unknown_log_level(self) -> None:
        with pytest.raises(CssForgeError, match=LOG_LEVEL_VAR):
            CssForgeConfig.from_env({LOG_LEVEL_VAR: "chatty"})

    @pytest.mark.parametrize(
        ("token", "expected"),
        [(">", Combinator.CHILD), ("+", Combinator.ADJACENT_SIBLING), (" ", Combinator.DESCENDANT)],
    )
    def test_default_combinator(self, token: str, expected: Combinator) -> None:
        config = CssForgeConfig.from_env({DEFAULT_COMBINATOR_VAR: token})
        assert config.default_combinator is expected

    def test_invalid_default_combinator(self) -> None:
        with pytest.raises(InvalidCombinatorError):
            CssForgeConfig.from_env({DEFAULT_COMBINATOR_VAR: "=>"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_VAR, "ERROR")
        assert CssForgeConfig.from_env().log_level == "ERROR"
