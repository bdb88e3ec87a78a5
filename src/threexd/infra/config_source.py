"""Filesystem-backed implementation of :class:`~threexd.core.protocols.ConfigSource`.

``OSError`` raised while reading is caught here and re-raised as
:class:`~threexd.exceptions.ConfigReadError` — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

from pathlib import Path

from threexd.exceptions import ConfigReadError


class DirectoryConfigSource:
    """Concrete :class:`ConfigSource` that looks up files in one directory.

    Usage::

        source = DirectoryConfigSource(Path.cwd())
        if source.exists("config.json"):
            text = source.read_text("config.json")
    """

    def __init__(self, root: Path) -> None:
        self._root: Path = root

    @property
    def root(self) -> Path:
        return self._root

    def exists(self, name: str) -> bool:
        """Return ``True`` if anything (file or not) exists at *name*.

        A directory called ``config.json`` counts as present, claims
        priority over YAML, and then fails in :meth:`read_text`.
        """
        return (self._root / name).exists()

    def read_text(self, name: str) -> str:
        """Read *name* as UTF-8 text.

        Raises
        ------
        ConfigReadError
            When the file cannot be opened or decoded.
        """
        path = self._root / name
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(
                f"Could not read {path}: {exc}",
                hint="Check that the file is readable, or remove it to use "
                "command-line options.",
            ) from exc
