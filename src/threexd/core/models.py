"""Domain models for 3xd.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Effective settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RunConfig:
    """Settings consumed by the import runner."""

    all: bool = False
    """Prefix every output line with ``[All]``."""

    verbose: bool = False
    """Emit a progress line every ten rows."""


# ---------------------------------------------------------------------------
# Config file formats
# ---------------------------------------------------------------------------

class ConfigFormat(Enum):
    """Supported config file formats, declared in priority order."""

    JSON = "json"
    YAML = "yaml"

    @property
    def file_name(self) -> str:
        return f"config.{self.value}"

    @property
    def template_name(self) -> str:
        return f"config_template.{self.value}"


# ---------------------------------------------------------------------------
# Resolution result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Outcome of a config lookup.

    ``config`` and ``fmt`` are either both set (a file was found and
    parsed) or both ``None`` (no config file present).
    """

    config: RunConfig | None = None
    fmt: ConfigFormat | None = None
    warnings: tuple[str, ...] = ()

    @property
    def present(self) -> bool:
        return self.config is not None

    def effective(self, fallback: RunConfig) -> RunConfig:
        """Return the file-derived config, or *fallback* when absent."""
        return self.config if self.config is not None else fallback
