"""Runtime configuration for the diagnostic builder.

Test mode used to be an ambient process-wide lookup; here it is an explicit
flag that callers pass in. ``DiagnosticConfig.from_env`` reads it from the
environment (optionally seeded from a ``.env`` file).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

TEST_MODE_ENV = "TYPO_DIAGNOSTICS_TEST_MODE"

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_flag(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class DiagnosticConfig:
    """Switches that change how diagnostics are built.

    Attributes:
        test_mode: When True no actions or telemetry are produced and the
            description is the bare rule id.
    """

    test_mode: bool = False

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> "DiagnosticConfig":
        """Build a config from ``TYPO_DIAGNOSTICS_TEST_MODE``."""

        if dotenv_path is not None:
            load_dotenv(dotenv_path=str(dotenv_path), override=False)
        return cls(test_mode=_parse_flag(os.environ.get(TEST_MODE_ENV)))
