"""CLI console helpers with optional Rich support.

Notices, warnings and errors go to stderr through this module.  The
import report itself is plain stdout text and never passes through
Rich, so ``[All]`` is not mistaken for markup.

Message text is never parsed as markup: config errors quote the user's
file verbatim, and a stray ``[/x`` must print as-is.  Only the fixed
labels (``WARNING:``, ``Error:``, ...) carry a style.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from threexd.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?(?:bold|dim|red|green|yellow|cyan)(?: [a-z]+)*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Remove the style tags this package uses from *text*."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Stderr writer: Rich when importable, plain ``print`` otherwise."""

    def print(self, markup: str = "") -> None:
        """Render a fixed markup string (never user-supplied text)."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(strip_markup(markup), file=sys.stderr)
            return
        rich_console.print(markup)

    def labelled(self, label: str | None, text: str, *, style: str = "") -> None:
        """Render ``<label> <text>``; only *label* is styled.

        *text* is wrapped in a ``rich.text.Text`` so brackets inside it
        are printed literally.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(text if label is None else f"{label} {text}", file=sys.stderr)
            return

        from rich.text import Text

        if label is None:
            rich_console.print(Text(text, style=style))
        else:
            rich_console.print(Text.assemble((label, style), " ", text))

    def notice(self, message: str) -> None:
        self.labelled(None, message, style="dim")

    def warning(self, message: str) -> None:
        self.labelled("WARNING:", message, style="bold yellow")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Render ``Error:`` and, when given, a ``Hint:`` line."""
        self.labelled("Error:", message, style="bold red")
        if hint:
            self.labelled("Hint:", hint, style="yellow")


console = _ConsoleProxy()
