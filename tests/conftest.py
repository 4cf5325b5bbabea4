"""Shared pytest fixtures and configuration for the css-forge test suite.

Guidelines
----------
* Core tests must be pure — no prompts, no terminal assumptions.
* questionary is never driven for real; prompts are scripted or mocked.
* Tests must not depend on the caller's ``CSS_FORGE_*`` environment.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CSS_FORGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CSS_FORGE_DEFAULT_COMBINATOR", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels attached by ``main()``."""
    yield
    package_logger = logging.getLogger("css_forge")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
