from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.diagnostics import DiagnosticFactory, WeakStringInterner
from src.language_check import (
    QuickFixError,
    RuleSettings,
    apply_action,
    diagnose_text,
    typo_from_match,
)
from src.language_check.language_check_config import DEFAULT_DISABLED_RULES
from src.models import (
    ActionKind,
    DisableCategory,
    DisableRule,
    IncorrectExample,
    ReplaceWithSuggestion,
)


class DummyMatch:
    def __init__(
        self,
        *,
        rule_id: str = "MORFOLOGIK_RULE_EN_GB",
        category: str = "TYPOS",
        offset: int | None = 5,
        length: int | None = 3,
        replacements: list[str] | None = None,
    ) -> None:
        self.ruleId = rule_id
        self.category = category
        self.message = "Possible spelling mistake found."
        self.ruleIssueType = "misspelling"
        self.replacements = ["the"] if replacements is None else replacements
        self.offset = offset
        self.errorLength = length


class DummyTool:
    def __init__(self, matches: list[DummyMatch], language: str = "en-GB") -> None:
        self._matches = matches
        self.language = language
        self.captured_texts: list[str] = []

    def check(self, text: str) -> list[DummyMatch]:
        self.captured_texts.append(text)
        return self._matches


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events = []

    def typo_found(self, typo) -> None:
        self.events.append(typo)


def test_typo_from_match_maps_fields() -> None:
    typo = typo_from_match(DummyMatch(), lang="en-GB", element="essay.md")

    assert typo.location.element == "essay.md"
    assert (typo.location.range.start, typo.location.range.end) == (5, 8)
    assert typo.info.rule.id == "MORFOLOGIK_RULE_EN_GB"
    assert typo.info.rule.category == "TYPOS"
    assert typo.info.lang == "en-GB"
    assert typo.fixes == ("the",)
    # the built-in catalogue has an example for this rule
    assert typo.info.incorrect_example is not None
    assert typo.info.incorrect_example.flagged == "teh"


def test_typo_from_match_tolerates_missing_offsets() -> None:
    match = DummyMatch(offset=None, length=None)
    del match.category

    typo = typo_from_match(match, lang="en-GB", element=None, examples={})

    assert typo.location.range.start == 0
    assert typo.location.range.end == 0
    assert typo.info.rule.category == "MISC"
    assert typo.info.incorrect_example is None
    assert not typo.location.is_resolved


def test_typo_from_match_uses_supplied_examples() -> None:
    example = IncorrectExample.from_marked("<marker>Teh</marker> end.", ["The"])

    typo = typo_from_match(
        DummyMatch(), lang="en-GB", element="a.md", examples={"MORFOLOGIK_RULE_EN_GB": example}
    )

    assert typo.info.incorrect_example == example


def test_diagnose_text_builds_one_record_per_match() -> None:
    tool = DummyTool([DummyMatch(), DummyMatch(rule_id="EN_A_VS_AN", category="MISC")])
    telemetry = RecordingTelemetry()
    factory = DiagnosticFactory(telemetry=telemetry, interner=WeakStringInterner())

    records = diagnose_text(
        "This teh text.", tool, element="essay.md", is_on_the_fly=True, factory=factory
    )

    assert tool.captured_texts == ["This teh text."]
    assert len(records) == 2
    assert all(record.element == "essay.md" for record in records)
    assert records[0].action_kinds[0] is ActionKind.REPLACE_WITH_SUGGESTION
    assert len(telemetry.events) == 2


def test_diagnose_text_skips_disabled_rules_and_categories() -> None:
    settings = RuleSettings()
    settings.disable_rule("EN_A_VS_AN")
    settings.disable_category("en-GB", "STYLE")
    tool = DummyTool(
        [
            DummyMatch(),
            DummyMatch(rule_id="EN_A_VS_AN", category="MISC"),
            DummyMatch(rule_id="PASSIVE_VOICE", category="STYLE"),
        ]
    )

    records = diagnose_text(
        "text", tool, element="essay.md", is_on_the_fly=False, settings=settings
    )

    assert len(records) == 1
    assert records[0].actions == ()


def test_replacement_action_rewrites_text() -> None:
    typo = typo_from_match(
        DummyMatch(replacements=["the", "ten"]), lang="en-GB", element="essay.md"
    )
    action = ReplaceWithSuggestion(typo)

    assert apply_action(action, settings=RuleSettings(), text="This teh text.") == (
        "This the text."
    )
    assert apply_action(action, settings=RuleSettings(), text="This teh text.", choice=1) == (
        "This ten text."
    )


def test_replacement_action_errors() -> None:
    typo = typo_from_match(DummyMatch(), lang="en-GB", element="essay.md")
    action = ReplaceWithSuggestion(typo)

    with pytest.raises(QuickFixError):
        apply_action(action, settings=RuleSettings(), text="This teh text.", choice=3)
    with pytest.raises(QuickFixError):
        apply_action(action, settings=RuleSettings(), text="shrt")
    with pytest.raises(QuickFixError):
        apply_action(action, settings=RuleSettings())


def test_disable_actions_update_settings() -> None:
    settings = RuleSettings()
    typo = typo_from_match(DummyMatch(), lang="en-GB", element="essay.md")

    assert apply_action(DisableRule(typo.info.rule), settings=settings) is None
    apply_action(DisableCategory("en-GB", "TYPOS"), settings=settings)

    assert "MORFOLOGIK_RULE_EN_GB" in settings.disabled_rules
    assert settings.categories_for("en-GB") == {"TYPOS"}
    assert settings.categories_for("de-DE") == set()
    assert not settings.is_enabled("en-GB", "OTHER", "TYPOS")
    assert settings.is_enabled("de-DE", "OTHER", "TYPOS")


def test_disabling_twice_reports_no_change() -> None:
    settings = RuleSettings()

    assert settings.disable_rule("RULE") is True
    assert settings.disable_rule("RULE") is False
    assert settings.disable_category("en-GB", "TYPOS") is True
    assert settings.disable_category("en-GB", "TYPOS") is False


def test_default_settings_copy_defaults() -> None:
    settings = RuleSettings.with_defaults()
    settings.disable_rule("NEW_RULE")

    assert DEFAULT_DISABLED_RULES <= settings.disabled_rules
    assert "NEW_RULE" not in DEFAULT_DISABLED_RULES
