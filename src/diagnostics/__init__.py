"""Diagnostic builder exports.

Callers import from ``src.diagnostics``; submodules are loaded lazily so the
models can be imported without pulling in pystache or python-dotenv.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .actions import build_actions
    from .config import DiagnosticConfig
    from .description import render_description
    from .descriptor import DiagnosticFactory, build_diagnostic
    from .errors import DiagnosticsError, UnresolvedLocationError
    from .interner import (
        DESCRIPTION_INTERNER,
        InternedText,
        WeakStringInterner,
        intern_or_fetch,
    )
    from .messages import MessageBundle, action_title
    from .telemetry import LoggingTelemetrySink, NullTelemetrySink, TelemetrySink

__all__ = [
    "build_actions",
    "build_diagnostic",
    "render_description",
    "intern_or_fetch",
    "action_title",
    "DiagnosticConfig",
    "DiagnosticFactory",
    "DiagnosticsError",
    "UnresolvedLocationError",
    "DESCRIPTION_INTERNER",
    "InternedText",
    "WeakStringInterner",
    "MessageBundle",
    "LoggingTelemetrySink",
    "NullTelemetrySink",
    "TelemetrySink",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "build_actions": (".actions", "build_actions"),
    "build_diagnostic": (".descriptor", "build_diagnostic"),
    "render_description": (".description", "render_description"),
    "intern_or_fetch": (".interner", "intern_or_fetch"),
    "action_title": (".messages", "action_title"),
    "DiagnosticConfig": (".config", "DiagnosticConfig"),
    "DiagnosticFactory": (".descriptor", "DiagnosticFactory"),
    "DiagnosticsError": (".errors", "DiagnosticsError"),
    "UnresolvedLocationError": (".errors", "UnresolvedLocationError"),
    "DESCRIPTION_INTERNER": (".interner", "DESCRIPTION_INTERNER"),
    "InternedText": (".interner", "InternedText"),
    "WeakStringInterner": (".interner", "WeakStringInterner"),
    "MessageBundle": (".messages", "MessageBundle"),
    "LoggingTelemetrySink": (".telemetry", "LoggingTelemetrySink"),
    "NullTelemetrySink": (".telemetry", "NullTelemetrySink"),
    "TelemetrySink": (".telemetry", "TelemetrySink"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes."""

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.diagnostics{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
