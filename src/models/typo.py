"""Immutable model of a single detected writing issue ("typo").

A :class:`Typo` is produced by the checking pipeline (LanguageTool matches are
converted in :mod:`src.language_check.typo_adapter`) and consumed by the
diagnostic builder. The models are frozen pydantic models so the same typo can
be shared safely between threads.

Fields:
- location: the element that was checked plus the flagged range inside it
- info: rule metadata (message, rule, language, optional incorrect example)
- fixes: ordered suggested replacements (possibly empty)
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_MARKER_PATTERN = re.compile(r"<marker>(.*?)</marker>", re.DOTALL)


class TextRange(BaseModel):
    """Half-open ``[start, end)`` character range."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "TextRange":
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start


class TypoLocation(BaseModel):
    """Where a typo lives.

    ``element`` identifies the checked text (a filename, a document chunk id).
    It stays ``None`` until the checking pipeline has resolved it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    element: str | None = None
    range: TextRange

    @property
    def is_resolved(self) -> bool:
        return self.element is not None


class Rule(BaseModel):
    """Identifier and category of the rule that flagged a typo."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    category: str
    description: str = ""

    @field_validator("id", "category", mode="before")
    def _strip_required(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("must not be empty")
        return result


class IncorrectExample(BaseModel):
    """An example of the flagged pattern together with its corrections.

    ``start``/``end`` mark the flagged span inside ``text``. Corrections replace
    that span; entries may be blank or ``None`` and are then ignored.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    corrections: tuple[str | None, ...] = ()

    @model_validator(mode="after")
    def _check_span(self) -> "IncorrectExample":
        if not self.start <= self.end <= len(self.text):
            raise ValueError("highlighted span must lie inside the example text")
        return self

    @classmethod
    def from_marked(
        cls, marked: str, corrections: tuple[str | None, ...] | list[str | None] = ()
    ) -> "IncorrectExample":
        """Build an example from LanguageTool's ``<marker>...</marker>`` notation.

        Only the first marker is used; text without a marker highlights nothing.
        """
        found = _MARKER_PATTERN.search(marked)
        if found is None:
            return cls(text=marked, start=0, end=0, corrections=tuple(corrections))
        text = marked[: found.start()] + found.group(1) + marked[found.end() :]
        text = _MARKER_PATTERN.sub(r"\1", text)
        start = found.start()
        return cls(
            text=text,
            start=start,
            end=start + len(found.group(1)),
            corrections=tuple(corrections),
        )

    @property
    def flagged(self) -> str:
        return self.text[self.start : self.end]

    @property
    def has_corrections(self) -> bool:
        """True when at least one correction is non-blank."""
        return any(correction and correction.strip() for correction in self.corrections)

    def visible_corrections(self) -> list[str]:
        return [c for c in self.corrections if c and c.strip()]


class TypoInfo(BaseModel):
    """Rule metadata attached to a typo."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str
    rule: Rule
    lang: str
    incorrect_example: IncorrectExample | None = None

    @field_validator("message", "lang", mode="before")
    def _strip_strings(cls, value: object) -> str:
        return str(value or "").strip()

    @model_validator(mode="after")
    def _require_lang(self) -> "TypoInfo":
        if not self.lang:
            raise ValueError("lang must not be empty")
        return self


class Typo(BaseModel):
    """A detected writing issue."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    location: TypoLocation
    info: TypoInfo
    fixes: tuple[str, ...] = ()

    @field_validator("fixes", mode="before")
    def _normalise_fixes(cls, value: object) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            # allow a single suggestion as a bare string
            return (value,)
        return tuple(str(x) for x in value)  # type: ignore[union-attr]
