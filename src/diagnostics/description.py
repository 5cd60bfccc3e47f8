"""Render the user-facing description of a typo.

The description is an HTML document built from ``templates/description.mustache``
with pystache:

- a paragraph with the rule message, padded at the bottom when an incorrect
  example follows;
- a two-column table holding the "Incorrect:" row and, when at least one
  correction is non-blank, the "Correct:" row.

Outside on-the-fly sessions every text cell ends with a non-breaking space
because the batch results view trims trailing whitespace from cells.

Rendered documents are interned so identical descriptions share one string.
In test mode the renderer returns the bare rule id instead.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import pystache

from src.models import Typo

from .config import DiagnosticConfig
from .example_renderer import render_correct, render_incorrect
from .interner import DESCRIPTION_INTERNER, WeakStringInterner
from .messages import DEFAULT_BUNDLE, MessageBundle

LOGGER = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DESCRIPTION_TEMPLATE = "description.mustache"
NBSP = "&nbsp;"


@lru_cache(maxsize=None)
def _load_template(name: str) -> str:
    path = TEMPLATES_DIR / name
    if not path.exists():
        raise FileNotFoundError(f"Template file not found: {path}")
    return path.read_text(encoding="utf-8")


def build_description_context(
    typo: Typo, is_on_the_fly: bool, messages: MessageBundle | None = None
) -> dict[str, Any]:
    """Collect the values the description template needs."""

    msg = messages or DEFAULT_BUNDLE
    example = typo.info.incorrect_example
    context: dict[str, Any] = {
        "message": typo.info.message,
        "nbsp": "" if is_on_the_fly else NBSP,
        "has_example": example is not None,
        "example": None,
    }
    if example is None:
        return context

    correct = None
    if example.has_corrections:
        correct = {
            "correct_label": msg("correct-label"),
            "correct_html": render_correct(example),
        }
    context["example"] = {
        "incorrect_label": msg("incorrect-label"),
        "incorrect_html": render_incorrect(example),
        "correct": correct,
    }
    return context


def render_description(
    typo: Typo,
    is_on_the_fly: bool,
    *,
    config: DiagnosticConfig | None = None,
    messages: MessageBundle | None = None,
    interner: WeakStringInterner | None = None,
) -> str:
    """Return the description shown for ``typo``.

    Args:
        typo: The detected issue.
        is_on_the_fly: True for interactive sessions, False for batch runs.
        config: Runtime switches; test mode returns the rule id verbatim.
        messages: Bundle used for the row labels.
        interner: Cache to share rendered documents through (defaults to the
            process-wide description interner).
    """

    if config is not None and config.test_mode:
        return typo.info.rule.id

    context = build_description_context(typo, is_on_the_fly, messages)
    renderer = pystache.Renderer()
    html = renderer.render(_load_template(DESCRIPTION_TEMPLATE), context)
    LOGGER.debug(
        "Rendered description for rule %s (example: %s, on the fly: %s)",
        typo.info.rule.id,
        context["has_example"],
        is_on_the_fly,
    )
    cache = interner if interner is not None else DESCRIPTION_INTERNER
    return cache.intern(html)
