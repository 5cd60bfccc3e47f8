"""Convert LanguageTool matches into :class:`~src.models.Typo` values."""

from __future__ import annotations

import logging
from typing import Mapping

from src.models import IncorrectExample, Rule, TextRange, Typo, TypoInfo, TypoLocation

from .language_check_config import RULE_EXAMPLES

LOGGER = logging.getLogger(__name__)


def _safe_int(value: object, *, name: str, rule_id: str) -> int:
    """Convert ``value`` to a non-negative int; LanguageTool or mocks may send junk."""
    try:
        return max(0, int(value or 0))  # type: ignore[call-overload]
    except (TypeError, ValueError):
        LOGGER.warning("Invalid %s for rule %s; defaulting to 0", name, rule_id)
        return 0


def typo_from_match(
    match: object,
    *,
    lang: str,
    element: str | None,
    examples: Mapping[str, IncorrectExample] | None = None,
) -> Typo:
    """Build a typo from a ``language_tool_python`` match.

    Args:
        match: The LanguageTool match object.
        lang: Language code the tool was checking (e.g. ``en-GB``).
        element: Identifier of the checked text; ``None`` leaves the location
            unresolved.
        examples: Rule id to example catalogue (defaults to ``RULE_EXAMPLES``).
    """

    rule_id = getattr(match, "ruleId", "UNKNOWN") or "UNKNOWN"
    category = getattr(match, "category", "MISC") or "MISC"
    message = str(getattr(match, "message", "") or "").strip()
    replacements = list(getattr(match, "replacements", []) or [])

    offset = _safe_int(getattr(match, "offset", 0), name="offset", rule_id=rule_id)
    length = _safe_int(
        getattr(match, "errorLength", 0), name="errorLength", rule_id=rule_id
    )

    catalogue = RULE_EXAMPLES if examples is None else examples
    return Typo(
        location=TypoLocation(
            element=element, range=TextRange(start=offset, end=offset + length)
        ),
        info=TypoInfo(
            message=message or rule_id,
            rule=Rule(id=rule_id, category=category),
            lang=lang,
            incorrect_example=catalogue.get(rule_id),
        ),
        fixes=replacements,
    )
