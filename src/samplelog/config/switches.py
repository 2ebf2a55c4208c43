"""Import-time switch that compiles the recorder down to a no-op."""

from __future__ import annotations

import os

DISABLE_ENV_VAR = "SAMPLELOG_DISABLED"
_TRUTHY = {"1", "true", "yes", "on"}


def flag_enabled(raw: str | None) -> bool:
    """Return True when an environment flag value reads as "on"."""
    return (raw or "").strip().lower() in _TRUTHY


# Read once: flipping the variable after import has no effect.
RECORDING_DISABLED = flag_enabled(os.getenv(DISABLE_ENV_VAR))


def recording_disabled() -> bool:
    """Return True when the package was imported with recording switched off."""
    return RECORDING_DISABLED
