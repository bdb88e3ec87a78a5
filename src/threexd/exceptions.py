"""Custom exception hierarchy for 3xd.

All exceptions that cross layer boundaries must inherit from
:class:`ThreexdError`.  Raw library exceptions (``OSError``,
``json.JSONDecodeError``, ``yaml.YAMLError``) are caught where they
occur and re-raised as a typed subclass defined here.

Hierarchy
---------
ThreexdError
├── ConfigError
│   ├── ConfigReadError
│   └── ConfigParseError
└── EnvironmentError
"""

from __future__ import annotations


class ThreexdError(Exception):
    """Base exception for all 3xd errors.

    The CLI error boundary renders any subclass as a one-line message
    (plus optional hint) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigError(ThreexdError):
    """Base class for failures while loading a config file."""


class ConfigReadError(ConfigError):
    """Raised when a config file exists but cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when a config file is malformed or has the wrong shape."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(ThreexdError):
    """Raised when a required runtime dependency is not available."""

