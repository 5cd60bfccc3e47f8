"""Language check package exports.

This package is the LanguageTool host around the diagnostic builder. Callers
import from ``src.language_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    # These imports are only for type checkers; they are not executed at runtime
    from .checker import diagnose_text
    from .language_check_config import DEFAULT_DISABLED_RULES, RULE_EXAMPLES
    from .language_tool_manager import LanguageToolManager
    from .quick_fixes import QuickFixError, apply_action, apply_replacement
    from .rule_settings import RuleSettings
    from .typo_adapter import typo_from_match

__all__ = [
    "diagnose_text",
    "typo_from_match",
    "apply_action",
    "apply_replacement",
    "QuickFixError",
    "LanguageToolManager",
    "RuleSettings",
    "DEFAULT_DISABLED_RULES",
    "RULE_EXAMPLES",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "diagnose_text": (".checker", "diagnose_text"),
    "typo_from_match": (".typo_adapter", "typo_from_match"),
    "apply_action": (".quick_fixes", "apply_action"),
    "apply_replacement": (".quick_fixes", "apply_replacement"),
    "QuickFixError": (".quick_fixes", "QuickFixError"),
    "LanguageToolManager": (".language_tool_manager", "LanguageToolManager"),
    "RuleSettings": (".rule_settings", "RuleSettings"),
    "DEFAULT_DISABLED_RULES": (".language_check_config", "DEFAULT_DISABLED_RULES"),
    "RULE_EXAMPLES": (".language_check_config", "RULE_EXAMPLES"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    This avoids importing submodules until actually used, which stops import
    order problems when multiple components import from ``src.language_check``.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.language_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
