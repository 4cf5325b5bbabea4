"""Process exit codes returned by the ``css-forge`` CLI."""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed and printed its result."""

GENERAL_ERROR: int = 1
"""A CssForgeError other than a selector error was reported."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the css-forge hierarchy reached the boundary."""

SELECTOR_ERROR: int = 3
"""The requested selector broke an ordering, uniqueness or combinator rule."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
