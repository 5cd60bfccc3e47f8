"""Diagnostic records and the remediation actions attached to them.

Actions are plain data carriers. Executing them (rewriting text, updating rule
settings) happens at the host boundary in :mod:`src.language_check.quick_fixes`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .enums import ActionKind, HighlightType
from .typo import Rule, TextRange, Typo


@dataclass(frozen=True)
class ReplaceWithSuggestion:
    """Replace the flagged span with one of the typo's fixes."""

    kind: ClassVar[ActionKind] = ActionKind.REPLACE_WITH_SUGGESTION

    typo: Typo

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self.typo.fixes


@dataclass(frozen=True)
class DisableRule:
    """Stop reporting issues for ``rule``."""

    kind: ClassVar[ActionKind] = ActionKind.DISABLE_RULE

    rule: Rule


@dataclass(frozen=True)
class DisableCategory:
    """Stop reporting issues for every rule in ``category`` for ``lang``."""

    kind: ClassVar[ActionKind] = ActionKind.DISABLE_CATEGORY

    lang: str
    category: str


DiagnosticAction = Union[ReplaceWithSuggestion, DisableRule, DisableCategory]


@dataclass(frozen=True)
class DiagnosticRecord:
    """Everything the host needs to present one typo.

    ``description`` is either rendered markup or, in test mode, the bare rule
    id. Hosts should treat it as an opaque display string.
    """

    element: str
    text_range: TextRange
    description: str
    actions: tuple[DiagnosticAction, ...]
    highlight_type: HighlightType = HighlightType.GENERIC_ERROR_OR_WARNING
    is_on_the_fly: bool = False
    after_end_of_line: bool = False
    show_tooltip: bool = True

    @property
    def action_kinds(self) -> list[ActionKind]:
        return [action.kind for action in self.actions]
