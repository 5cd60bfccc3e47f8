"""LanguageTool setup helpers.

This module centralises LanguageTool instantiation so that the rule settings
changed by "disable" actions are applied in one place.
"""

from __future__ import annotations

from typing import Any, Sequence
import logging

import language_tool_python

from .rule_settings import RuleSettings

# Default LanguageTool server configuration.
#
# Interactive checks run on short passages, but batch runs may pass whole
# documents; raise the server's check timeout so those are not aborted.
_DEFAULT_CONFIG = {
    "requestLimitPeriodInSeconds": 60,
    "maxCheckTimeMillis": 120000,
}


class LanguageToolManager:
    """Factory class responsible for configuring LanguageTool instances."""

    def __init__(
        self,
        *,
        settings: RuleSettings | None = None,
        config: dict[str, Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or RuleSettings.with_defaults()
        self.logger = logger or logging.getLogger(__name__)
        self.config = dict(config) if config is not None else dict(_DEFAULT_CONFIG)

    def build_tool(self, language: str) -> Any:
        """Build a LanguageTool instance for ``language``."""

        kwargs: dict[str, Any] = {}
        if self.config:
            kwargs["config"] = self.config

        try:
            tool = language_tool_python.LanguageTool(language, **kwargs)
        except TypeError:
            if "config" in kwargs:
                # Older language_tool_python versions do not accept config.
                kwargs.pop("config")
                self.logger.info(
                    "LanguageTool does not accept 'config'; falling back to default constructor",
                )
                tool = language_tool_python.LanguageTool(language, **kwargs)
            else:
                raise

        self.apply_settings(tool, language)
        self.logger.info("Created LanguageTool for language: %s", language)
        return tool

    def apply_settings(self, tool: Any, language: str) -> None:
        """Push the current disabled rules and categories onto ``tool``."""

        tool.disabled_rules = set(self.settings.disabled_rules)
        tool.disabled_categories = self.settings.categories_for(language)

    def build_tools(self, languages: Sequence[str]) -> list[Any]:
        """Build LanguageTool instances for each language in ``languages``."""

        return [self.build_tool(language) for language in languages]
