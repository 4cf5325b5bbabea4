"""JSON encode/decode helpers built on the standard ``json`` module.

:func:`json_decode` turns a decoded JSON object back into an instance of
a caller-supplied type, so behaviour defined on that type (for example
:meth:`Rectangle.area <css_forge.core.models.Rectangle.area>`) is
available on the decoded data.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from css_forge.exceptions import PrototypeMismatchError

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _encode_default(value: Any) -> Any:
    """Serialize dataclass instances as their field mapping."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(
        f"Object of type {type(value).__name__} is not JSON serializable"
    )


def json_encode(value: Any) -> str:
    """Return the compact JSON text for *value*.

    Key order follows insertion order; dataclass instances are encoded
    as objects of their fields.

    >>> json_encode([1, 2, 3])
    '[1,2,3]'
    """
    return json.dumps(value, separators=_COMPACT_SEPARATORS, default=_encode_default)


def json_decode(prototype: type[T], text: str) -> T:
    """Parse *text* and build a *prototype* instance from the result.

    Parameters
    ----------
    prototype:
        A type whose constructor accepts the decoded object's keys as
        keyword arguments (dataclasses work out of the box).
    text:
        JSON text encoding an object.

    Raises
    ------
    json.JSONDecodeError
        If *text* is not valid JSON (propagated unmodified).
    PrototypeMismatchError
        If the payload is not a JSON object, or its keys do not fit
        *prototype*.
    """
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise PrototypeMismatchError(
            f"expected a JSON object for {prototype.__name__}, "
            f"got {type(payload).__name__}",
        )
    try:
        return prototype(**payload)
    except TypeError as exc:
        raise PrototypeMismatchError(
            f"payload does not fit {prototype.__name__}: {exc}",
            hint=f"Keys present: {', '.join(sorted(payload)) or '(none)'}",
        ) from exc
