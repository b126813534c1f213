"""Inspector configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class InspectorConfig:
    """Read-only settings held by a ProjectInspector instance.

    verbose: emit diagnostic log lines for errors the detectors swallow
             and for delegated commands. Never changes return values.
    """

    verbose: bool = False

    @classmethod
    def from_env(cls) -> InspectorConfig:
        """Build a config from environment variables.

        Reads:
            PROJECT_INSPECTOR_VERBOSE: 1 | true | yes | on (default: off)
        """
        raw = os.environ.get("PROJECT_INSPECTOR_VERBOSE", "")
        return cls(verbose=raw.strip().lower() in _TRUTHY)
