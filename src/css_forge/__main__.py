"""Allow ``python -m css_forge`` invocation.

Delegates to the CLI error boundary so that ``python -m css_forge``
behaves identically to the ``css-forge`` console script.
"""

from __future__ import annotations

from css_forge.cli.app import cli

if __name__ == "__main__":
    cli()
