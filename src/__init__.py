"""Typo diagnostics package."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "diagnostics",
    "language_check",
    "models",
]
