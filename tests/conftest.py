"""Shared pytest fixtures and configuration for the 3xd test suite.

Guidelines
----------
* Core tests resolve config through an in-memory source — no
  filesystem access.
* Filesystem tests use ``tmp_path`` only; nothing reads the real
  working directory.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest


class FakeConfigSource:
    """In-memory :class:`~threexd.core.protocols.ConfigSource`.

    Values that are exceptions are raised from :meth:`read_text`
    instead of being returned.
    """

    def __init__(self, files: dict[str, str | Exception] | None = None) -> None:
        self.files: dict[str, str | Exception] = dict(files or {})
        self.reads: list[str] = []

    def exists(self, name: str) -> bool:
        return name in self.files

    def read_text(self, name: str) -> str:
        self.reads.append(name)
        value = self.files[name]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture()
def make_source() -> Callable[..., FakeConfigSource]:
    """Factory fixture: ``make_source({"config.json": "{}"})``."""

    def _make(files: dict[str, str | Exception] | None = None) -> FakeConfigSource:
        return FakeConfigSource(files)

    return _make
