"""Execute the actions attached to diagnostics.

Actions are data; this module is the host side that gives them behaviour.
Replacements rewrite the checked text, while the disable actions update the
shared :class:`RuleSettings`.
"""

from __future__ import annotations

import logging

from src.models import (
    DiagnosticAction,
    DisableCategory,
    DisableRule,
    ReplaceWithSuggestion,
)

from .rule_settings import RuleSettings

LOGGER = logging.getLogger(__name__)


class QuickFixError(Exception):
    """Raised when an action cannot be applied to the given text."""


def apply_replacement(action: ReplaceWithSuggestion, text: str, choice: int = 0) -> str:
    """Return ``text`` with the flagged span replaced by fix number ``choice``."""

    fixes = action.suggestions
    if not 0 <= choice < len(fixes):
        raise QuickFixError(
            f"No suggestion #{choice} for rule {action.typo.info.rule.id!r} "
            f"({len(fixes)} available)"
        )
    span = action.typo.location.range
    if span.end > len(text):
        raise QuickFixError(
            f"Range {span.start}-{span.end} is outside the text ({len(text)} chars)"
        )
    LOGGER.debug(
        "Replacing %r with %r at %d", text[span.start : span.end], fixes[choice], span.start
    )
    return text[: span.start] + fixes[choice] + text[span.end :]


def apply_action(
    action: DiagnosticAction,
    *,
    settings: RuleSettings,
    text: str | None = None,
    choice: int = 0,
) -> str | None:
    """Run ``action``.

    Returns the rewritten text for replacements and ``None`` for the disable
    actions, which only change ``settings``.
    """

    if isinstance(action, ReplaceWithSuggestion):
        if text is None:
            raise QuickFixError("A replacement needs the text it applies to")
        return apply_replacement(action, text, choice)
    if isinstance(action, DisableRule):
        settings.disable_rule(action.rule.id)
        return None
    if isinstance(action, DisableCategory):
        settings.disable_category(action.lang, action.category)
        return None
    raise TypeError(f"Unsupported action: {action!r}")
