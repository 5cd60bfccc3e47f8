"""Mutable rule settings updated by "disable" actions.

The host applies these settings when it builds LanguageTool instances and
when it filters matches, so disabled rules and categories stop producing
diagnostics.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .language_check_config import DEFAULT_DISABLED_CATEGORIES, DEFAULT_DISABLED_RULES

LOGGER = logging.getLogger(__name__)


@dataclass
class RuleSettings:
    """Disabled rule ids and disabled categories per language."""

    disabled_rules: set[str] = field(default_factory=set)
    disabled_categories: dict[str, set[str]] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def with_defaults(cls) -> "RuleSettings":
        return cls(
            disabled_rules=set(DEFAULT_DISABLED_RULES),
            disabled_categories={
                lang: set(categories)
                for lang, categories in DEFAULT_DISABLED_CATEGORIES.items()
            },
        )

    def disable_rule(self, rule_id: str) -> bool:
        """Disable ``rule_id``; returns False if it was already disabled."""
        with self._lock:
            if rule_id in self.disabled_rules:
                return False
            self.disabled_rules.add(rule_id)
        LOGGER.info("Disabled rule %s", rule_id)
        return True

    def disable_category(self, lang: str, category: str) -> bool:
        """Disable ``category`` for ``lang``; returns False if already disabled."""
        with self._lock:
            categories = self.disabled_categories.setdefault(lang, set())
            if category in categories:
                return False
            categories.add(category)
        LOGGER.info("Disabled category %s for %s", category, lang)
        return True

    def categories_for(self, lang: str) -> set[str]:
        return set(self.disabled_categories.get(lang, set()))

    def is_enabled(self, lang: str, rule_id: str, category: str) -> bool:
        if rule_id in self.disabled_rules:
            return False
        return category not in self.disabled_categories.get(lang, set())
