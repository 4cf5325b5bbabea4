"""Rich table breaking a built selector down into its parts.

Used by ``css-forge build --explain``.  Only presentation lives here;
the parts come straight from
:meth:`~css_forge.core.selector.SimpleSelector.parts`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from css_forge.cli.console import console
from css_forge.core.models import Combinator
from css_forge.core.selector import SimpleSelector
from css_forge.exceptions import EnvironmentError


def _import_rich_table() -> tuple[type[Any], Any]:
    """Import rich table and text lazily.

    Attribute tokens such as ``href$=".png"`` look like Rich markup
    tags, so token cells are plain :class:`rich.text.Text`.
    """
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


def _combinator_label(combinator: Combinator) -> str:
    """Render a combinator readably; the descendant space is otherwise invisible."""
    return f"{combinator.name.lower().replace('_', ' ')} ({combinator.value!r})"


def describe_rows(
    segments: Sequence[SimpleSelector],
    combinators: Sequence[Combinator],
) -> list[tuple[str, str, str, str]]:
    """Return ``(segment, part, token, rendered)`` rows for the table.

    A combinator row is placed between consecutive segments.  An empty
    segment yields a single ``(empty)`` row.
    """
    rows: list[tuple[str, str, str, str]] = []
    for index, segment in enumerate(segments, start=1):
        if index > 1:
            rows.append(("", "combinator", _combinator_label(combinators[index - 2]), ""))
        parts = segment.parts()
        if not parts:
            rows.append((str(index), "(empty)", "", ""))
            continue
        for part, token in parts:
            rows.append((str(index), part.label, token, part.wrap(token)))
    return rows


def display_explanation(
    segments: Sequence[SimpleSelector],
    combinators: Sequence[Combinator],
) -> None:
    """Print a Rich table listing every part of every segment."""
    table_class, text_class = _import_rich_table()

    table = table_class(
        title="Selector Parts",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Part", justify="left", min_width=14)
    table.add_column("Token", justify="left", min_width=10)
    table.add_column("Rendered", justify="left", min_width=10)

    for segment, part, token, rendered in describe_rows(segments, combinators):
        table.add_row(segment, part, text_class(token), text_class(rendered))

    console.print()
    console.print(table)
