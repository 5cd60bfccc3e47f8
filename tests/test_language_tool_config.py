from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import src.language_check.language_tool_manager as ltm_mod
from src.language_check import LanguageToolManager, RuleSettings


class DummyLanguageTool:
    instances: list["DummyLanguageTool"] = []

    def __init__(self, language, *args, **kwargs):
        self.language = language
        self.kwargs = kwargs
        self.disabled_rules: set[str] = set()
        self.disabled_categories: set[str] = set()
        DummyLanguageTool.instances.append(self)

    def close(self) -> None:
        return None


def test_build_tool_passes_config_and_settings(monkeypatch) -> None:
    """The manager passes server config and applies the rule settings."""
    monkeypatch.setattr(ltm_mod.language_tool_python, "LanguageTool", DummyLanguageTool)
    settings = RuleSettings(disabled_rules={"WHITESPACE_RULE"})
    settings.disable_category("en-GB", "STYLE")
    manager = LanguageToolManager(settings=settings)

    tool = manager.build_tool("en-GB")

    assert tool.language == "en-GB"
    assert tool.kwargs["config"]["maxCheckTimeMillis"] == 120000
    assert tool.disabled_rules == {"WHITESPACE_RULE"}
    assert tool.disabled_categories == {"STYLE"}


def test_build_tool_falls_back_without_config(monkeypatch) -> None:
    calls: list[dict] = []

    class OldLanguageTool(DummyLanguageTool):
        def __init__(self, language, **kwargs):
            calls.append(kwargs)
            if "config" in kwargs:
                raise TypeError("unexpected keyword argument 'config'")
            super().__init__(language, **kwargs)

    monkeypatch.setattr(ltm_mod.language_tool_python, "LanguageTool", OldLanguageTool)

    tool = LanguageToolManager(settings=RuleSettings()).build_tool("en-US")

    assert tool.language == "en-US"
    assert len(calls) == 2
    assert "config" not in calls[1]


def test_apply_settings_picks_up_later_changes(monkeypatch) -> None:
    monkeypatch.setattr(ltm_mod.language_tool_python, "LanguageTool", DummyLanguageTool)
    manager = LanguageToolManager(settings=RuleSettings())
    tools = manager.build_tools(["en-GB", "de-DE"])

    manager.settings.disable_rule("EN_A_VS_AN")
    manager.settings.disable_category("de-DE", "TYPOS")
    for tool in tools:
        manager.apply_settings(tool, tool.language)

    assert all("EN_A_VS_AN" in tool.disabled_rules for tool in tools)
    assert tools[0].disabled_categories == set()
    assert tools[1].disabled_categories == {"TYPOS"}
