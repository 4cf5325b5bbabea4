"""Simple and combined CSS selectors.

A :class:`SimpleSelector` collects the parts of one selector unit::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Parts are validated as they are added, never at render time:

* element, id and pseudo-element may be set only once;
* parts must arrive in non-decreasing rank order
  (see :class:`~css_forge.core.models.SelectorPart`).

A :class:`CombinedSelector` joins two finished nodes with a
:class:`~css_forge.core.models.Combinator` and renders them recursively.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from css_forge.core.models import Combinator, SelectorPart
from css_forge.core.protocols import SelectorNode
from css_forge.exceptions import (
    PART_ORDER_HINT,
    DuplicateSingularPartError,
    OrderViolationError,
)

logger = logging.getLogger(__name__)

# Attribute holding each category's token(s) on SimpleSelector.
_FIELDS: dict[SelectorPart, str] = {
    SelectorPart.ELEMENT: "element_token",
    SelectorPart.ID: "id_token",
    SelectorPart.CLASS: "class_tokens",
    SelectorPart.ATTRIBUTE: "attribute_tokens",
    SelectorPart.PSEUDO_CLASS: "pseudo_class_tokens",
    SelectorPart.PSEUDO_ELEMENT: "pseudo_element_token",
}

_BY_RANK: dict[int, SelectorPart] = {part.rank: part for part in SelectorPart}


# ---------------------------------------------------------------------------
# Simple selector
# ---------------------------------------------------------------------------

class SimpleSelector:
    """Fluent, mutable accumulator for the parts of one selector.

    Every mutating method returns ``self`` so calls can be chained::

        SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")

    Raises
    ------
    DuplicateSingularPartError
        When element, id or pseudo-element is set a second time.
    OrderViolationError
        When a part ranks lower than one already added.
    """

    def __init__(self) -> None:
        self.element_token: str | None = None
        self.id_token: str | None = None
        self.class_tokens: list[str] = []
        self.attribute_tokens: list[str] = []
        self.pseudo_class_tokens: list[str] = []
        self.pseudo_element_token: str | None = None
        self.last_rank: int = 0

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_element(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ELEMENT, value)

    def set_id(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ID, value)

    def add_class(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.CLASS, value)

    def add_attribute(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.PSEUDO_CLASS, value)

    def set_pseudo_element(self, value: str) -> SimpleSelector:
        return self._add(SelectorPart.PSEUDO_ELEMENT, value)

    # Chain-friendly names matching the builder facade.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element
    pseudoClass = add_pseudo_class
    pseudoElement = set_pseudo_element

    def add(self, part: SelectorPart, value: str) -> SimpleSelector:
        """Add *value* under an explicit *part* category."""
        return self._add(part, value)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def accepts(self, part: SelectorPart) -> bool:
        """Return ``True`` if adding *part* next would succeed."""
        return not self._is_taken(part) and part.rank >= self.last_rank

    def parts(self) -> list[tuple[SelectorPart, str]]:
        """Return ``(category, token)`` pairs in render order.

        Singular categories holding an empty value are omitted.
        """
        result: list[tuple[SelectorPart, str]] = []
        for part in SelectorPart:
            stored = getattr(self, _FIELDS[part])
            if part.singular:
                if stored:
                    result.append((part, stored))
            else:
                result.extend((part, token) for token in stored)
        return result

    def copy(self) -> SimpleSelector:
        """Return an independent selector with the same state."""
        clone = SimpleSelector()
        clone.element_token = self.element_token
        clone.id_token = self.id_token
        clone.class_tokens = list(self.class_tokens)
        clone.attribute_tokens = list(self.attribute_tokens)
        clone.pseudo_class_tokens = list(self.pseudo_class_tokens)
        clone.pseudo_element_token = self.pseudo_element_token
        clone.last_rank = self.last_rank
        return clone

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        return "".join(part.wrap(token) for part, token in self.parts())

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return self.parts() == other.parts() and self.last_rank == other.last_rank

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _is_taken(self, part: SelectorPart) -> bool:
        return part.singular and bool(getattr(self, _FIELDS[part]))

    def _add(self, part: SelectorPart, value: str) -> SimpleSelector:
        if self._is_taken(part):
            logger.debug("Rejected duplicate %s %r", part.label, value)
            raise DuplicateSingularPartError(
                f"{part.label} is already set to "
                f"{getattr(self, _FIELDS[part])!r}; cannot set {value!r}",
                hint=(
                    "Element, id and pseudo-element may occur only once "
                    "inside a selector."
                ),
            )
        if part.rank < self.last_rank:
            previous = _BY_RANK[self.last_rank]
            logger.debug(
                "Rejected %s %r after %s", part.label, value, previous.label,
            )
            raise OrderViolationError(
                f"cannot add {part.label} {value!r} after {previous.label}",
                hint=PART_ORDER_HINT,
            )

        field_name = _FIELDS[part]
        if part.singular:
            setattr(self, field_name, value)
        else:
            getattr(self, field_name).append(value)
        self.last_rank = part.rank
        logger.debug("Added %s %r", part.label, value)
        return self


setattr(SimpleSelector, "class", SimpleSelector.add_class)


# ---------------------------------------------------------------------------
# Combined selector
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CombinedSelector:
    """Two selector nodes joined by a combinator.

    The combinator may be given as a :class:`Combinator` or its token
    (``" "``, ``">"``, ``"+"``, ``"~"``).  Simple selectors are stored as
    snapshots, so mutating the caller's instance afterwards does not
    change this node.
    """

    left: SelectorNode
    combinator: Combinator
    right: SelectorNode

    def __post_init__(self) -> None:
        combinator = Combinator.parse(self.combinator)
        object.__setattr__(self, "combinator", combinator)

        for side in ("left", "right"):
            node = getattr(self, side)
            if isinstance(node, SimpleSelector):
                object.__setattr__(self, side, node.copy())

        logger.debug("Combined selectors with %r", combinator.value)

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator.value} {self.right.render()}"

    stringify = render

    def __str__(self) -> str:
        return self.render()
