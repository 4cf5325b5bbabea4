"""Stateless facade for building CSS selectors.

Each entry point starts a brand-new :class:`SimpleSelector`, so one
facade instance may be shared freely between unrelated builds::

    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).render()
    # 'div#main + table#data'
"""

from __future__ import annotations

from collections.abc import Sequence

from css_forge.core.models import Combinator
from css_forge.core.protocols import SelectorNode
from css_forge.core.selector import CombinedSelector, SimpleSelector


class CssSelectorBuilder:
    """Entry points returning fresh, chainable selectors."""

    __slots__ = ()

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().set_pseudo_element(value)

    def combine(
        self,
        left: SelectorNode,
        combinator: Combinator | str,
        right: SelectorNode,
    ) -> CombinedSelector:
        """Join two finished selectors with *combinator*.

        Raises
        ------
        InvalidCombinatorError
            If *combinator* is not one of ``" "``, ``">"``, ``"+"``, ``"~"``.
        """
        return CombinedSelector(left, Combinator.parse(combinator), right)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element


# ``class`` is a keyword, so the spelling is reachable only through
# ``getattr(builder, "class")``.
setattr(CssSelectorBuilder, "class", CssSelectorBuilder.class_)

css_selector_builder = CssSelectorBuilder()


def combine_chain(
    segments: Sequence[SelectorNode],
    combinators: Sequence[Combinator | str],
) -> SelectorNode:
    """Join ``segments[i]`` and ``segments[i + 1]`` with ``combinators[i]``.

    Nesting is to the right, ``a > (b + c)``; the rendered text is the
    same either way.  A single segment is returned as is.

    Raises
    ------
    ValueError
        If *segments* is empty or there is not exactly one combinator
        between each pair of segments.
    InvalidCombinatorError
        If any combinator token is unknown.
    """
    if not segments:
        raise ValueError("at least one selector is required")
    if len(combinators) != len(segments) - 1:
        raise ValueError(
            f"{len(segments)} selectors need {len(segments) - 1} combinators, "
            f"got {len(combinators)}"
        )

    node = segments[-1]
    for segment, combinator in zip(
        reversed(segments[:-1]), reversed(combinators), strict=True,
    ):
        node = css_selector_builder.combine(segment, combinator, node)
    return node
