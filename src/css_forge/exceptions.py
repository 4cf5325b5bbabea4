"""Custom exception hierarchy for css-forge.

Every error raised on purpose by css-forge inherits from
:class:`CssForgeError` so that the CLI error boundary can render a clean
message and pick an exit code without leaking stack traces.

Malformed JSON handed to :func:`~css_forge.core.json_codec.json_decode`
is the one exception: the standard library's
:class:`json.JSONDecodeError` propagates unmodified.

Hierarchy
---------
CssForgeError
├── SelectorError
│   ├── DuplicateSingularPartError
│   ├── OrderViolationError
│   └── InvalidCombinatorError
├── PrototypeMismatchError
├── CompositionCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class CssForgeError(Exception):
    """Base exception for all css-forge errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Selector construction -------------------------------------------------

class SelectorError(CssForgeError):
    """Raised when a selector cannot be built as requested."""


class DuplicateSingularPartError(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""


class OrderViolationError(SelectorError):
    """Raised when a part is added after a higher-ranked part."""


class InvalidCombinatorError(SelectorError):
    """Raised when two selectors are joined with an unknown combinator."""


# --- JSON decoding ---------------------------------------------------------

class PrototypeMismatchError(CssForgeError):
    """Raised when a decoded payload does not fit the requested prototype."""


# --- Interactive composition -----------------------------------------------

class CompositionCancelledError(CssForgeError):
    """Raised when the user dismisses an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CssForgeError):
    """Raised when an optional UI dependency is not available."""


PART_ORDER_HINT = (
    "Selector parts must follow the order: element, id, class, "
    "attribute, pseudo-class, pseudo-element."
)
