"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from typing import Protocol


class ConfigSource(Protocol):
    """Contract for looking up config files by name.

    Any object that implements :meth:`exists` and :meth:`read_text`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def exists(self, name: str) -> bool:
        """Return ``True`` when an entry called *name* is present.

        A present entry that later turns out to be unreadable is still
        reported as existing; :meth:`read_text` surfaces the failure.
        """
        ...  # pragma: no cover

    def read_text(self, name: str) -> str:
        """Return the full text of *name*.

        Implementations must map all backend-specific exceptions to
        :class:`~threexd.exceptions.ThreexdError` subclasses.

        Raises
        ------
        ConfigReadError
            When the entry cannot be read.
        """
        ...  # pragma: no cover
