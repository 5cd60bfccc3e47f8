"""Usage telemetry sinks.

The builder reports a single ``typo_found`` event whenever it offers a
replacement. Sinks are fire-and-forget: the builder never looks at a return
value and does not let sink failures escape.
"""

from __future__ import annotations

import logging
from typing import Protocol

from src.models import Typo

LOGGER = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Receiver for usage events."""

    def typo_found(self, typo: Typo) -> None:
        """Record that a typo with available fixes was shown to the user."""
        ...


class LoggingTelemetrySink:
    """Default sink that writes events to the module logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER

    def typo_found(self, typo: Typo) -> None:
        self.logger.debug(
            "typo.found rule=%s lang=%s fixes=%d",
            typo.info.rule.id,
            typo.info.lang,
            len(typo.fixes),
        )


class NullTelemetrySink:
    """Sink that drops every event."""

    def typo_found(self, typo: Typo) -> None:
        return None
