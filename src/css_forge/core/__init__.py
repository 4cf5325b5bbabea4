"""Core layer — selector construction, rectangle model and JSON codec.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from css_forge.core.builder import CssSelectorBuilder, combine_chain, css_selector_builder
from css_forge.core.json_codec import json_decode, json_encode
from css_forge.core.models import Combinator, Rectangle, SelectorPart, rectangle
from css_forge.core.protocols import SelectorNode
from css_forge.core.selector import CombinedSelector, SimpleSelector

__all__: list[str] = [
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "Rectangle",
    "SelectorNode",
    "SelectorPart",
    "SimpleSelector",
    "combine_chain",
    "css_selector_builder",
    "json_decode",
    "json_encode",
    "rectangle",
]
