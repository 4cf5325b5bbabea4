"""css-forge — fluent CSS selector builder with small object-model helpers.

Builds selector strings from element, id, class, attribute,
pseudo-class and pseudo-element parts, validating part order and
uniqueness as they are added.
"""

from css_forge.core import (
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    Rectangle,
    SelectorPart,
    SimpleSelector,
    css_selector_builder,
    json_decode,
    json_encode,
    rectangle,
)
from css_forge.version import __version__

__all__: list[str] = [
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "Rectangle",
    "SelectorPart",
    "SimpleSelector",
    "__version__",
    "css_selector_builder",
    "json_decode",
    "json_encode",
    "rectangle",
]
