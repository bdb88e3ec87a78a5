"""Process exit statuses returned by :func:`threexd.cli.app.main`.

``cli()`` passes these straight to :func:`sys.exit`; tests compare
against the names, never the bare numbers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Import finished, or help / man / version was printed."""

GENERAL_ERROR: int = 1
"""A config file exists but could not be read or parsed, or a required
library is missing."""

UNEXPECTED_ERROR: int = 2
"""Anything outside the ThreexdError hierarchy.  argparse also exits
with 2 on bad options."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
