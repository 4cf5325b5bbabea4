"""CLI console helpers with optional Rich support.

Optional UI dependencies are imported lazily so that bootstrap paths
(``--help``, ``--version``) and plain ``build`` output keep working when
Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from css_forge.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback.

    Keyword arguments are forwarded to Rich and ignored by the plain
    fallback.
    """

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, **rich_options: Any) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(*objects, file=sys.stderr if self._stderr else sys.stdout)
            return
        rich_console.print(*objects, **rich_options)

    def result(self, text: str) -> None:
        """Print command output verbatim (no markup, emoji codes or highlighting)."""
        self.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy(stderr=True)
"""Diagnostics, errors and tables."""

output = _ConsoleProxy(stderr=False)
"""Command results, suitable for piping."""


def escape(text: str) -> str:
    """Escape Rich markup in *text*; returned unchanged without Rich."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)
