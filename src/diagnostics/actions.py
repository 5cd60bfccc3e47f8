"""Decide which remediation actions accompany a typo."""

from __future__ import annotations

import logging

from src.models import (
    DiagnosticAction,
    DisableCategory,
    DisableRule,
    ReplaceWithSuggestion,
    Typo,
)

from .config import DiagnosticConfig
from .telemetry import TelemetrySink

LOGGER = logging.getLogger(__name__)


def _report_typo_found(telemetry: TelemetrySink, typo: Typo) -> None:
    try:
        telemetry.typo_found(typo)
    except Exception:
        LOGGER.warning(
            "Telemetry sink failed for rule %s; continuing",
            typo.info.rule.id,
            exc_info=True,
        )


def build_actions(
    typo: Typo,
    is_on_the_fly: bool,
    *,
    config: DiagnosticConfig | None = None,
    telemetry: TelemetrySink | None = None,
) -> tuple[DiagnosticAction, ...]:
    """Return the ordered actions offered for ``typo``.

    Batch runs and test mode get no actions. Interactive runs get, in order:
    a replacement (only when the typo has fixes), "disable rule" and
    "disable category". Offering a replacement reports one ``typo_found``
    telemetry event.
    """

    if not is_on_the_fly or (config is not None and config.test_mode):
        return ()

    actions: list[DiagnosticAction] = []
    if typo.fixes:
        if telemetry is not None:
            _report_typo_found(telemetry, typo)
        actions.append(ReplaceWithSuggestion(typo))

    actions.append(DisableRule(typo.info.rule))
    actions.append(DisableCategory(typo.info.lang, typo.info.rule.category))
    return tuple(actions)
