"""Assemble a :class:`DiagnosticRecord` from a typo.

``DiagnosticFactory`` bundles the collaborators (config, telemetry sink and
message bundle) so a checking pipeline can create it once and call
:meth:`DiagnosticFactory.build` for every typo. ``build_diagnostic`` is a
one-shot wrapper for callers that do not keep a factory around.
"""

from __future__ import annotations

import logging

from src.models import DiagnosticRecord, HighlightType, Typo

from .actions import build_actions
from .config import DiagnosticConfig
from .description import render_description
from .errors import UnresolvedLocationError
from .interner import WeakStringInterner
from .messages import MessageBundle
from .telemetry import LoggingTelemetrySink, TelemetrySink

LOGGER = logging.getLogger(__name__)


class DiagnosticFactory:
    """Builds diagnostic records with a fixed set of collaborators."""

    def __init__(
        self,
        *,
        config: DiagnosticConfig | None = None,
        telemetry: TelemetrySink | None = None,
        messages: MessageBundle | None = None,
        interner: WeakStringInterner | None = None,
    ) -> None:
        self.config = config or DiagnosticConfig()
        self.telemetry = telemetry if telemetry is not None else LoggingTelemetrySink()
        self.messages = messages
        self.interner = interner

    def build(self, typo: Typo, is_on_the_fly: bool) -> DiagnosticRecord:
        """Build the record for ``typo``.

        Raises:
            UnresolvedLocationError: if the typo's location has no element.
        """

        element = typo.location.element
        if element is None:
            raise UnresolvedLocationError(typo.info.rule.id)

        description = render_description(
            typo,
            is_on_the_fly,
            config=self.config,
            messages=self.messages,
            interner=self.interner,
        )
        actions = build_actions(
            typo, is_on_the_fly, config=self.config, telemetry=self.telemetry
        )
        LOGGER.debug(
            "Built diagnostic for %s [%d:%d] rule=%s actions=%d",
            element,
            typo.location.range.start,
            typo.location.range.end,
            typo.info.rule.id,
            len(actions),
        )
        return DiagnosticRecord(
            element=element,
            text_range=typo.location.range,
            description=description,
            actions=actions,
            highlight_type=HighlightType.GENERIC_ERROR_OR_WARNING,
            is_on_the_fly=is_on_the_fly,
        )


def build_diagnostic(
    typo: Typo,
    is_on_the_fly: bool,
    *,
    config: DiagnosticConfig | None = None,
    telemetry: TelemetrySink | None = None,
    messages: MessageBundle | None = None,
) -> DiagnosticRecord:
    """Build a single diagnostic record with the given collaborators."""

    factory = DiagnosticFactory(config=config, telemetry=telemetry, messages=messages)
    return factory.build(typo, is_on_the_fly)
