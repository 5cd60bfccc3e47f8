"""Exceptions raised by the diagnostic builder."""

from __future__ import annotations


class DiagnosticsError(Exception):
    """Base class for diagnostic builder failures."""


class UnresolvedLocationError(DiagnosticsError, RuntimeError):
    """Raised when a typo reaches the builder without a resolved element.

    This is a caller bug: the checking pipeline must resolve every location
    before asking for a diagnostic.
    """

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Typo for rule {rule_id!r} has no resolved location")
        self.rule_id = rule_id
