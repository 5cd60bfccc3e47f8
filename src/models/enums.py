"""Enumerations shared by the diagnostic models.

Values are plain strings so records can be serialised or logged without
extra conversion.
"""

from __future__ import annotations

from enum import Enum


class ActionKind(str, Enum):
    """Tags for the remediation actions attached to a diagnostic.

    The declaration order matches the order actions are offered in.
    """

    REPLACE_WITH_SUGGESTION = "REPLACE_WITH_SUGGESTION"
    DISABLE_RULE = "DISABLE_RULE"
    DISABLE_CATEGORY = "DISABLE_CATEGORY"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]


class HighlightType(str, Enum):
    """How the host should highlight a diagnostic."""

    GENERIC_ERROR_OR_WARNING = "GENERIC_ERROR_OR_WARNING"
    WEAK_WARNING = "WEAK_WARNING"
    ERROR = "ERROR"

    @classmethod
    def all_values(cls) -> list[str]:
        return [m.value for m in cls]
