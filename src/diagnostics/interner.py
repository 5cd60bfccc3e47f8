"""Weakly held string interner for rendered descriptions.

Large documents often trigger the same rule many times and every hit renders
to the same markup. Interning lets all of those diagnostics share a single
string instance. Entries are weakly referenced, so once no diagnostic holds a
description it drops out of the cache without an explicit invalidation call.

Plain ``str`` objects cannot be weakly referenced; :class:`InternedText` is a
``str`` subclass that can, and compares equal to the plain content.
"""

from __future__ import annotations

import logging
import threading
import weakref

LOGGER = logging.getLogger(__name__)


class InternedText(str):
    """A ``str`` that can live in a weak-value mapping."""


class WeakStringInterner:
    """Thread-safe insert-or-fetch cache keyed by exact content."""

    def __init__(self) -> None:
        self._entries: "weakref.WeakValueDictionary[str, InternedText]" = (
            weakref.WeakValueDictionary()
        )
        self._lock = threading.Lock()

    def intern(self, content: str) -> InternedText:
        """Return the shared instance for ``content``, storing it if new."""

        with self._lock:
            existing = self._entries.get(content)
            if existing is not None:
                return existing
            if isinstance(content, InternedText):
                interned = content
            else:
                interned = InternedText(content)
            # The key must be a plain str: keying on the value would keep it alive.
            self._entries[str(content)] = interned
            LOGGER.debug("Interned new description (%d chars)", len(content))
            return interned

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, content: object) -> bool:
        return content in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


# Process-wide interner shared by every description renderer.
DESCRIPTION_INTERNER = WeakStringInterner()


def intern_or_fetch(content: str) -> InternedText:
    """Intern ``content`` in the process-wide description cache."""
    return DESCRIPTION_INTERNER.intern(content)
