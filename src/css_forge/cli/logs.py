"""Logging setup for the CLI process.

Library modules only create loggers; handlers are attached here, once,
when the CLI starts.
"""

from __future__ import annotations

import logging

from css_forge.exceptions import EnvironmentError

_FORMAT = "%(name)s: %(message)s"


def _rich_handler() -> logging.Handler:
    """Return a ``RichHandler`` on stderr or raise ``EnvironmentError``."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    from css_forge.cli.console import get_rich_console

    return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(level: int) -> None:
    """Attach a single stderr handler to the ``css_forge`` logger."""
    try:
        handler = _rich_handler()
    except EnvironmentError:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))

    package_logger = logging.getLogger("css_forge")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
