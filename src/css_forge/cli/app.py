"""CLI application entry point and command routing for css-forge.

This module is the **sole error boundary** for the application.  It
catches :class:`~css_forge.exceptions.CssForgeError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message (plus hint) on stderr, and returns a well-defined exit code.

Commands
--------
* ``css-forge build -e a -a 'href$=".png"' -p focus``
* ``css-forge build -e div -i main -j + -e table -i data``
* ``css-forge area 10 20`` / ``css-forge area --json '{"width":10,"height":20}'``
* ``css-forge compose`` (interactive)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from css_forge.cli import exit_codes
from css_forge.cli.console import console, escape, output
from css_forge.cli.logs import configure_logging
from css_forge.config import CssForgeConfig
from css_forge.core.builder import combine_chain
from css_forge.core.json_codec import json_decode, json_encode
from css_forge.core.models import Combinator, Rectangle, SelectorPart, rectangle
from css_forge.core.selector import SimpleSelector
from css_forge.exceptions import CssForgeError, SelectorError
from css_forge.version import __version__

logger = logging.getLogger(__name__)

_JOIN = "join"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _AppendStep(argparse.Action):
    """Record ``(kind, value)`` in command-line order under one dest."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps = list(getattr(namespace, self.dest, None) or [])
        steps.append((self.const, values))
        setattr(namespace, self.dest, steps)


def number(text: str) -> int | float:
    """Parse an ``int`` when possible, else a ``float``."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def _add_build_parser(subparsers: Any) -> None:
    build = subparsers.add_parser(
        "build",
        help="Build a selector from ordered parts.",
        description=(
            "Parts are applied in the order given, so out-of-order or "
            "repeated element/id/pseudo-element options are rejected."
        ),
    )
    part_options = (
        (("-e", "--element"), SelectorPart.ELEMENT, "NAME"),
        (("-i", "--id"), SelectorPart.ID, "ID"),
        (("-c", "--class"), SelectorPart.CLASS, "CLASS"),
        (("-a", "--attr"), SelectorPart.ATTRIBUTE, "ATTR"),
        (("-p", "--pseudo-class"), SelectorPart.PSEUDO_CLASS, "PSEUDO"),
        (("-P", "--pseudo-element"), SelectorPart.PSEUDO_ELEMENT, "PSEUDO"),
    )
    for flags, part, metavar in part_options:
        build.add_argument(
            *flags,
            dest="steps",
            action=_AppendStep,
            const=part,
            metavar=metavar,
            help=f"Add a {part.label} part.",
        )
    build.add_argument(
        "-j",
        "--join",
        dest="steps",
        action=_AppendStep,
        const=_JOIN,
        metavar="OP",
        help="Start a new selector joined by OP (' ', '>', '+' or '~').",
    )
    build.add_argument(
        "--explain",
        action="store_true",
        help="Also print a table of every part.",
    )
    build.set_defaults(handler=_handle_build)


def _add_area_parser(subparsers: Any) -> None:
    area = subparsers.add_parser(
        "area",
        help="Compute a rectangle's area.",
    )
    area.add_argument(
        "dimensions",
        nargs="*",
        type=number,
        metavar="DIM",
        help="Rectangle width and height.",
    )
    area.add_argument(
        "--json",
        dest="json_text",
        metavar="TEXT",
        help='Rectangle as JSON, e.g. \'{"width":10,"height":20}\'.',
    )
    area.add_argument(
        "--emit-json",
        action="store_true",
        help="Print the rectangle as JSON instead of its area.",
    )
    area.set_defaults(handler=_handle_area)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="css-forge",
        description="Fluent CSS selector builder.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    _add_build_parser(subparsers)
    _add_area_parser(subparsers)
    compose = subparsers.add_parser(
        "compose",
        help="Compose a selector interactively.",
    )
    compose.set_defaults(handler=_handle_compose)
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_build(args: argparse.Namespace, config: CssForgeConfig) -> int:
    """Apply each step in order, then print the combined selector."""
    steps: list[tuple[Any, str]] = args.steps or []
    if not steps:
        raise SelectorError(
            "No selector parts given.",
            hint="Example: css-forge build -e a -p hover",
        )

    segments: list[SimpleSelector] = [SimpleSelector()]
    combinators: list[Combinator] = []
    for kind, value in steps:
        if kind == _JOIN:
            combinators.append(Combinator.parse(value))
            segments.append(SimpleSelector())
        elif not value:
            raise SelectorError(
                f"Empty {kind.label} value.",
                hint="Every part needs a non-empty token, e.g. -c item.",
            )
        else:
            segments[-1].add(kind, value)

    if any(not segment.parts() for segment in segments):
        raise SelectorError(
            "A --join has no selector on one side.",
            hint="Give at least one part on each side of --join.",
        )

    node = combine_chain(segments, combinators)
    logger.debug("Built %d selector(s)", len(segments))
    output.result(node.render())

    if args.explain:
        from css_forge.cli.explain import display_explanation

        display_explanation(segments, combinators)
    return exit_codes.SUCCESS


def _load_rectangle(args: argparse.Namespace) -> Rectangle:
    if args.json_text is not None:
        if args.dimensions:
            raise CssForgeError(
                "Give either WIDTH HEIGHT or --json, not both.",
            )
        try:
            return json_decode(Rectangle, args.json_text)
        except json.JSONDecodeError as exc:
            raise CssForgeError(
                f"Invalid JSON: {exc}",
                hint='Example: --json \'{"width":10,"height":20}\'',
            ) from exc

    if len(args.dimensions) != 2:
        raise CssForgeError(
            f"Expected WIDTH and HEIGHT, got {len(args.dimensions)} value(s).",
            hint="Example: css-forge area 10 20",
        )
    width, height = args.dimensions
    return rectangle(width, height)


def _handle_area(args: argparse.Namespace, config: CssForgeConfig) -> int:
    shape = _load_rectangle(args)
    if args.emit_json:
        output.result(json_encode(shape))
    else:
        output.result(str(shape.area()))
    return exit_codes.SUCCESS


def _handle_compose(args: argparse.Namespace, config: CssForgeConfig) -> int:
    from css_forge.cli.compose_prompt import prompt_composition

    segments, combinators = prompt_composition(config.default_combinator)
    output.result(combine_chain(segments, combinators).render())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the css-forge CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = CssForgeConfig.from_env()
    configure_logging(logging.DEBUG if args.verbose else config.log_level_number)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return args.handler(args, config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CssForgeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        if isinstance(exc, SelectorError):
            sys.exit(exit_codes.SELECTOR_ERROR)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
