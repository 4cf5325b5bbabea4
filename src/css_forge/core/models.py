"""Domain models for css-forge.

Value objects and enumerations shared by the selector builder, the JSON
codec and the CLI.  Nothing here performs I/O or depends on external
packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from css_forge.exceptions import InvalidCombinatorError


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rectangle:
    """A width-by-height rectangle with a computed area."""

    width: float
    """Horizontal extent."""

    height: float
    """Vertical extent."""

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {value!r}")

    def area(self) -> float:
        return self.width * self.height


def rectangle(width: float, height: float) -> Rectangle:
    """Return a :class:`Rectangle` of the given dimensions."""
    return Rectangle(width=width, height=height)


# ---------------------------------------------------------------------------
# Selector part categories
# ---------------------------------------------------------------------------

class SelectorPart(Enum):
    """The six part categories of a simple selector.

    Each member carries its ordering rank, the delimiters wrapped around
    its token when rendered, and whether the category may occur at most
    once per selector.  Members are declared in rank order.
    """

    ELEMENT = (1, "", "", True)
    ID = (2, "#", "", True)
    CLASS = (3, ".", "", False)
    ATTRIBUTE = (4, "[", "]", False)
    PSEUDO_CLASS = (5, ":", "", False)
    PSEUDO_ELEMENT = (6, "::", "", True)

    def __init__(self, rank: int, prefix: str, suffix: str, singular: bool) -> None:
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.singular = singular

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"pseudo-class"``."""
        return self.name.lower().replace("_", "-")

    def wrap(self, token: str) -> str:
        """Return *token* surrounded by this category's delimiters."""
        return f"{self.prefix}{token}{self.suffix}"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

class Combinator(str, Enum):
    """CSS relational operators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: Combinator | str) -> Combinator:
        """Return the combinator for *token*.

        Raises
        ------
        InvalidCombinatorError
            If *token* is not one of ``" "``, ``">"``, ``"+"``, ``"~"``.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidCombinatorError(
                f"unknown combinator {token!r}",
                hint="Use one of ' ', '>', '+' or '~'.",
            ) from None
