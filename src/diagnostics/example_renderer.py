"""HTML fragments for a rule's incorrect example and its corrections.

Both helpers split the example around its flagged span, escape every piece and
wrap the span in a coloured ``<span>``. The result is inserted unescaped into
the description template.
"""

from __future__ import annotations

from html import escape

from src.models import IncorrectExample

INCORRECT_STYLE = "color: #D8000C; text-decoration: underline;"
CORRECT_STYLE = "color: #2E7D32;"
CORRECTION_SEPARATOR = "<br/>"


def _highlight(before: str, span: str, after: str, style: str) -> str:
    return f'{escape(before)}<span style="{style}">{escape(span)}</span>{escape(after)}'


def render_incorrect(example: IncorrectExample) -> str:
    """Render the example with the flagged span highlighted."""
    text = example.text
    if example.start == example.end:
        return escape(text)
    return _highlight(
        text[: example.start], example.flagged, text[example.end :], INCORRECT_STYLE
    )


def render_correct(example: IncorrectExample) -> str:
    """Render one corrected sentence per non-blank correction.

    Returns an empty string when every correction is blank.
    """
    before = example.text[: example.start]
    after = example.text[example.end :]
    return CORRECTION_SEPARATOR.join(
        _highlight(before, correction, after, CORRECT_STYLE)
        for correction in example.visible_corrections()
    )
