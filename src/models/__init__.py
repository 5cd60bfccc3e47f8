"""Public model exports for the project.

Keep the :mod:`src` namespace clean: tests and other modules should import
``from src.models import Typo, DiagnosticRecord``.
"""

from __future__ import annotations

from .diagnostic import (
    DiagnosticAction,
    DiagnosticRecord,
    DisableCategory,
    DisableRule,
    ReplaceWithSuggestion,
)
from .enums import ActionKind, HighlightType
from .typo import IncorrectExample, Rule, TextRange, Typo, TypoInfo, TypoLocation

__all__ = [
    "ActionKind",
    "DiagnosticAction",
    "DiagnosticRecord",
    "DisableCategory",
    "DisableRule",
    "HighlightType",
    "IncorrectExample",
    "ReplaceWithSuggestion",
    "Rule",
    "TextRange",
    "Typo",
    "TypoInfo",
    "TypoLocation",
]
