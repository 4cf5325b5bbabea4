"""Protocols (interfaces) consumed by the core layer.

:class:`~css_forge.core.selector.CombinedSelector` accepts any node
satisfying :class:`SelectorNode` on either side, so simple and combined
selectors nest freely without a shared base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SelectorNode(Protocol):
    """Contract for anything that can be rendered as a CSS selector."""

    def render(self) -> str:
        """Return the selector as CSS text.

        Implementations must be pure: repeated calls return the same
        string and leave the node unchanged.
        """
        ...  # pragma: no cover
