"""Parsed invocations produced by the argument parser.

Exactly one of these is built per run; :func:`threexd.cli.app.main`
dispatches on its type.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ShowHelp:
    """No (or an unknown) subcommand was given."""


@dataclass(frozen=True, slots=True)
class ShowMan:
    """``3xd man``."""


@dataclass(frozen=True, slots=True)
class RunImport:
    """``3xd import`` — never shows the ``[All]`` prefix."""

    verbose: bool = False
    config_dir: Path | None = None

    @property
    def all(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class RunSync:
    """``3xd sync [-a]``."""

    all: bool = False
    verbose: bool = False
    config_dir: Path | None = None


Command = ShowHelp | ShowMan | RunImport | RunSync
