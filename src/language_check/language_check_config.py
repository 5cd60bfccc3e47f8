"""Default rule configuration for the LanguageTool host.

This module defines the rules disabled out of the box and a small catalogue
of incorrect/correct examples attached to diagnostics for well-known rules.
"""

from src.models import IncorrectExample

# Default rules to disable (users can add more through "disable rule" actions)
DEFAULT_DISABLED_RULES = {
    "WHITESPACE_RULE",
    "CONSECUTIVE_SPACES",
    "SENTENCE_WHITESPACE",
    "COMMA_PARENTHESIS_WHITESPACE",
    "DASH_RULE",
}


# Categories disabled per language code; empty by default.
DEFAULT_DISABLED_CATEGORIES: dict[str, set[str]] = {}


# Examples shown in descriptions, keyed by LanguageTool rule id. LanguageTool's
# HTTP API does not return rule examples, so the host keeps its own.
RULE_EXAMPLES: dict[str, IncorrectExample] = {
    "ENGLISH_WORD_REPEAT_RULE": IncorrectExample.from_marked(
        "This is <marker>is</marker> just an example.", ["is"]
    ),
    "EN_A_VS_AN": IncorrectExample.from_marked(
        "It was <marker>a</marker> honest mistake.", ["an"]
    ),
    "UPPERCASE_SENTENCE_START": IncorrectExample.from_marked(
        "This is a sentence. <marker>this</marker> is another.", ["This"]
    ),
    "MORFOLOGIK_RULE_EN_GB": IncorrectExample.from_marked(
        "This is <marker>teh</marker> example.", ["the"]
    ),
    "MORFOLOGIK_RULE_EN_US": IncorrectExample.from_marked(
        "This is <marker>teh</marker> example.", ["the"]
    ),
    "EN_COMPOUNDS": IncorrectExample.from_marked(
        "Keep your <marker>e mail</marker> short.", ["email", "e-mail"]
    ),
}
