"""Interactive selector composition for ``css-forge compose``.

This module is responsible for:

* Offering only the part kinds the current selector still accepts.
* Asking for each part's token via questionary.
* Asking whether to join another selector, and with which combinator.

The selector rules themselves live in
:class:`~css_forge.core.selector.SimpleSelector`; nothing here
re-implements them.
"""

from __future__ import annotations

from typing import Any

from css_forge.core.models import Combinator, SelectorPart
from css_forge.core.selector import SimpleSelector
from css_forge.exceptions import CompositionCancelledError, EnvironmentError

_DONE = "done"
_FINISH = "finish"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _ask(question: Any) -> Any:
    """Run a questionary prompt; ``None`` means Ctrl+C or Esc."""
    answer = question.ask()
    if answer is None:
        raise CompositionCancelledError(
            "Composition cancelled.",
            hint="Use arrow keys to choose, then press Enter.",
        )
    return answer


# ---------------------------------------------------------------------------
# Choice builders (pure — no prompting)
# ---------------------------------------------------------------------------

def available_parts(selector: SimpleSelector) -> list[SelectorPart]:
    """Return the part kinds that may be added to *selector* next."""
    return [part for part in SelectorPart if selector.accepts(part)]


def validate_token(text: str) -> bool | str:
    """questionary validator: ``True`` or the message to show."""
    return True if text else "Enter a value."


def _combinator_title(combinator: Combinator) -> str:
    """Build the label shown for *combinator*, e.g. ``"child  >"``."""
    name = combinator.name.lower().replace("_", " ")
    token = "(space)" if combinator is Combinator.DESCENDANT else combinator.value
    return f"{name:<18} {token}"


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _prompt_simple_selector(questionary: Any) -> SimpleSelector:
    selector = SimpleSelector()
    while True:
        parts = available_parts(selector)
        if not parts:
            return selector

        choices = [questionary.Choice(title=part.label, value=part) for part in parts]
        if selector.parts():
            choices.append(questionary.Choice(title="(done)", value=_DONE))

        preview = selector.render() or "(empty)"
        part = _ask(questionary.select(
            f"Selector so far: {preview}  Add a part:",
            choices=choices,
            use_arrow_keys=True,
            use_shortcuts=False,
        ))
        if part == _DONE:
            return selector

        token = _ask(questionary.text(f"{part.label} value:", validate=validate_token))
        selector.add(part, token)


def _prompt_combinator(questionary: Any, default: Combinator) -> Combinator | None:
    choices = [questionary.Choice(title="(finish)", value=_FINISH)]
    choices.extend(
        questionary.Choice(title=_combinator_title(combinator), value=combinator)
        for combinator in Combinator
    )
    selected = _ask(questionary.select(
        "Join another selector?",
        choices=choices,
        default=default,
        use_arrow_keys=True,
        use_shortcuts=False,
    ))
    if selected == _FINISH:
        return None
    return Combinator.parse(selected)


def prompt_composition(
    default_combinator: Combinator = Combinator.DESCENDANT,
) -> tuple[list[SimpleSelector], list[Combinator]]:
    """Interactively compose one or more joined simple selectors.

    Returns
    -------
    tuple
        ``(segments, combinators)`` where ``combinators[i]`` joins
        ``segments[i]`` and ``segments[i + 1]``.

    Raises
    ------
    CompositionCancelledError
        If the user dismisses any prompt.
    EnvironmentError
        If questionary is not installed.
    """
    questionary = _import_questionary()

    segments: list[SimpleSelector] = []
    combinators: list[Combinator] = []
    while True:
        segments.append(_prompt_simple_selector(questionary))
        combinator = _prompt_combinator(questionary, default_combinator)
        if combinator is None:
            return segments, combinators
        combinators.append(combinator)
