"""Environment-driven settings for the css-forge CLI."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from css_forge.core.models import Combinator
from css_forge.exceptions import CssForgeError

LOG_LEVEL_VAR = "CSS_FORGE_LOG_LEVEL"
DEFAULT_COMBINATOR_VAR = "CSS_FORGE_DEFAULT_COMBINATOR"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CssForgeConfig:
    log_level: str = "WARNING"
    default_combinator: Combinator = Combinator.DESCENDANT  # pre-selected by `compose`

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CssForgeConfig:
        """Build a config from ``CSS_FORGE_*`` environment variables.

        Raises
        ------
        CssForgeError
            If the log level is not a standard ``logging`` level name.
        InvalidCombinatorError
            If the default combinator is not a CSS combinator token.
        """
        env = os.environ if environ is None else environ

        log_level = env.get(LOG_LEVEL_VAR, cls.log_level).strip().upper()
        if log_level not in _LOG_LEVELS:
            raise CssForgeError(
                f"invalid {LOG_LEVEL_VAR} value {log_level!r}",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}.",
            )

        # Not stripped: the descendant combinator is a single space.
        combinator = Combinator.parse(
            env.get(DEFAULT_COMBINATOR_VAR, cls.default_combinator.value),
        )

        return cls(log_level=log_level, default_combinator=combinator)
