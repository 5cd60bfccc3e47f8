"""Display strings used in rendered descriptions and action titles.

The bundle is a thin lookup table so hosts can swap in translated strings
without touching the renderer.
"""

from __future__ import annotations

from typing import Mapping

from src.models import (
    DiagnosticAction,
    DisableCategory,
    DisableRule,
    ReplaceWithSuggestion,
)

DEFAULT_MESSAGES: dict[str, str] = {
    "incorrect-label": "Incorrect:",
    "correct-label": "Correct:",
    "replace-with": "Replace with '{0}'",
    "replace-family": "Replace with suggestion",
    "disable-rule": "Disable rule '{0}'",
    "disable-category": "Disable '{0}' category for {1}",
}


class MessageBundle:
    """Key to display-string lookup with ``str.format`` parameters."""

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    def message(self, key: str, *params: object) -> str:
        """Return the string for ``key``; unknown keys raise ``KeyError``."""
        template = self._messages[key]
        return template.format(*params) if params else template

    def __call__(self, key: str, *params: object) -> str:
        return self.message(key, *params)


DEFAULT_BUNDLE = MessageBundle()


def action_title(action: DiagnosticAction, bundle: MessageBundle | None = None) -> str:
    """Human readable title for ``action``, as shown in a quick-fix menu."""

    msg = bundle or DEFAULT_BUNDLE
    if isinstance(action, ReplaceWithSuggestion):
        if len(action.suggestions) == 1:
            return msg("replace-with", action.suggestions[0])
        return msg("replace-family")
    if isinstance(action, DisableRule):
        return msg("disable-rule", action.rule.description or action.rule.id)
    if isinstance(action, DisableCategory):
        return msg("disable-category", action.category, action.lang)
    raise TypeError(f"Unsupported action: {action!r}")
