"""Run LanguageTool over a text and turn every match into a diagnostic.

This is the host loop around the diagnostic builder: the tool finds matches,
the adapter turns them into typos, and the factory builds one record each.
Matches for rules or categories disabled in the settings are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from src.diagnostics.descriptor import DiagnosticFactory
from src.models import DiagnosticRecord, IncorrectExample

from .rule_settings import RuleSettings
from .typo_adapter import typo_from_match

LOGGER = logging.getLogger(__name__)


def _tool_language(tool: Any) -> str:
    return str(getattr(tool, "language", None) or getattr(tool, "lang", "") or "en-GB")


def diagnose_text(
    text: str,
    tool: Any,
    *,
    element: str,
    is_on_the_fly: bool,
    factory: DiagnosticFactory | None = None,
    settings: RuleSettings | None = None,
    examples: Mapping[str, IncorrectExample] | None = None,
) -> list[DiagnosticRecord]:
    """Check ``text`` with ``tool`` and build the diagnostics for it.

    Args:
        text: The text to check.
        tool: A LanguageTool instance (anything with ``check(text)``).
        element: Identifier recorded on every diagnostic (e.g. a filename).
        is_on_the_fly: True for interactive sessions.
        factory: Diagnostic factory to use; a default one is created if omitted.
        settings: Rule settings used to drop disabled matches.
        examples: Rule example catalogue passed to the typo adapter.
    """

    lang = _tool_language(tool)
    diagnostic_factory = factory or DiagnosticFactory()
    matches = tool.check(text) or []

    records: list[DiagnosticRecord] = []
    skipped = 0
    for match in matches:
        typo = typo_from_match(match, lang=lang, element=element, examples=examples)
        if settings is not None and not settings.is_enabled(
            lang, typo.info.rule.id, typo.info.rule.category
        ):
            skipped += 1
            continue
        records.append(diagnostic_factory.build(typo, is_on_the_fly))

    LOGGER.info(
        "Checked %s (%s): %d diagnostic(s), %d skipped by settings",
        element,
        lang,
        len(records),
        skipped,
    )
    return records
