"""Core import runner — produces the row-import report.

The runner never writes to a stream itself; each report line is handed
to an ``emit`` callable supplied by the caller (the CLI passes
``print``).  Output is fully determined by ``(verbose, all)``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

ROW_COUNT: int = 100
"""Number of rows every import reports."""

PROGRESS_INTERVAL: int = 10
"""A progress line is produced for every row number divisible by this."""

ALL_PREFIX: str = "[All]"


def display_prefix(all: bool) -> str:  # noqa: A002
    """Return ``[All]`` when *all* is set, else an empty string."""
    return ALL_PREFIX if all else ""


def import_lines(verbose: bool, all: bool) -> Iterator[str]:  # noqa: A002
    """Yield the report lines for one import, without trailing newlines.

    Rows ``1..ROW_COUNT-1`` are walked; the final banner reports the
    full :data:`ROW_COUNT`.  The prefix is always followed by a space,
    even when it is empty.
    """
    prefix = display_prefix(all)

    yield f"{prefix} Import begins..."
    for row in range(1, ROW_COUNT):
        if row % PROGRESS_INTERVAL == 0 and verbose:
            yield f"{prefix} Outputting {row} row.."
    yield f"{prefix} {ROW_COUNT} rows have been imported"


def run_import(
    verbose: bool,
    all: bool,  # noqa: A002
    emit: Callable[[str], None],
) -> None:
    """Run one import, passing every report line to *emit* in order."""
    for line in import_lines(verbose, all):
        emit(line)
