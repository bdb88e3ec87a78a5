"""CLI application entry point and command routing for 3xd.

This module is the **sole error boundary** for the entire application.
It catches :class:`~threexd.exceptions.ThreexdError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — config resolution and the import
  report are delegated to the core layer.
* Report lines, help and man text go to stdout; everything else goes
  through :data:`~threexd.cli.console.console` (stderr).
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from threexd.cli import exit_codes
from threexd.cli.commands import Command, RunImport, RunSync, ShowHelp, ShowMan
from threexd.cli.console import console
from threexd.core.config_resolver import ConfigResolver
from threexd.core.import_runner import run_import
from threexd.core.models import RunConfig
from threexd.core.protocols import ConfigSource
from threexd.exceptions import ThreexdError
from threexd.version import __version__

PROG: str = "3xd"

COMMANDS: tuple[str, ...] = ("man", "import", "sync")

# The only global option that takes a value.
_VALUE_SHORT: str = "C"
_VALUE_LONG: str = "--config-dir"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _global_options(*, suppress_defaults: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand.

    Subcommand copies use ``SUPPRESS`` defaults so that an option given
    only at the top level is not reset by the subparser.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_defaults else False,
        help="Display verbose output.",
    )
    parent.add_argument(
        "-C",
        "--config-dir",
        type=Path,
        metavar="DIR",
        default=argparse.SUPPRESS if suppress_defaults else None,
        help="Directory searched for config.json / config.yaml "
        "(default: current directory).",
    )
    return parent


def _build_parser() -> tuple[argparse.ArgumentParser, dict[str, argparse.ArgumentParser]]:
    """Construct the top-level parser and one parser per subcommand.

    The CLI supports:
    * ``3xd man``             — long-form description
    * ``3xd import``          — import 100 rows
    * ``3xd sync [-a]``       — import 100 rows, optionally ``[All]``-prefixed
    * ``3xd --version``
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Import 100 rows, row by row.",
        parents=[_global_options(suppress_defaults=False)],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub_globals = _global_options(suppress_defaults=True)
    subparsers = parser.add_subparsers(dest="command", metavar="<command>", title="commands")

    man_parser = subparsers.add_parser(
        "man",
        parents=[sub_globals],
        help="Show man.",
        description="Show a long description of 3xd and its commands.",
    )
    import_parser = subparsers.add_parser(
        "import",
        parents=[sub_globals],
        help="Import 100 rows.",
        description="Import 100 rows.",
    )
    sync_parser = subparsers.add_parser(
        "sync",
        parents=[sub_globals],
        help="Import 100 rows with an optional sync.",
        description="Import 100 rows with an optional sync.",
    )
    sync_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        default=False,
        help="Display the [All] prefix.",
    )

    return parser, {"man": man_parser, "import": import_parser, "sync": sync_parser}


def _takes_next_token(option: str) -> bool:
    """Return True when *option* expects its value in the following token.

    Covers ``-C``, short clusters ending in it (``-vC``), ``--config-dir``
    and its unambiguous abbreviations (``--conf``).  Attached values
    (``-Cdir``, ``--config-dir=dir``) do not.
    """
    if option.startswith("--"):
        return "=" not in option and len(option) > 2 and _VALUE_LONG.startswith(option)
    cluster = option[1:]
    return cluster.endswith(_VALUE_SHORT) and cluster.find(_VALUE_SHORT) == len(cluster) - 1


def _first_positional(arguments: Sequence[str]) -> str | None:
    """Return the first token that is not an option or an option value."""
    skip_next = False
    for token in arguments:
        if skip_next:
            skip_next = False
            continue
        if token == "--":
            continue
        if token.startswith("-"):
            skip_next = _takes_next_token(token)
            continue
        return token
    return None


def parse_command(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None = None,
) -> Command:
    """Turn process arguments into exactly one :data:`Command`.

    A missing or unknown subcommand maps to :class:`ShowHelp` instead of
    an argparse usage error.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    name = _first_positional(arguments)
    if name is not None and name not in COMMANDS:
        return ShowHelp()

    args = parser.parse_args(arguments)

    if args.command == "man":
        return ShowMan()
    if args.command == "import":
        return RunImport(verbose=args.verbose, config_dir=args.config_dir)
    if args.command == "sync":
        return RunSync(all=args.all, verbose=args.verbose, config_dir=args.config_dir)
    return ShowHelp()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_man(command_parsers: dict[str, argparse.ArgumentParser]) -> int:
    """Dispatch the ``man`` command."""
    from threexd.cli.man import render_man

    print(render_man(command_parsers))
    return exit_codes.SUCCESS


def _handle_import(command: RunImport | RunSync, source: ConfigSource | None) -> int:
    """Resolve settings and print the import report.

    Flow:
    1. Build the CLI-derived :class:`RunConfig`.
    2. Resolve ``config.json`` / ``config.yaml``; a present file replaces
       the CLI values entirely.
    3. Run the import, printing each line to stdout.
    """
    from threexd.infra.config_source import DirectoryConfigSource
    from threexd.infra.decoders import DEFAULT_DECODERS

    if source is None:
        source = DirectoryConfigSource(command.config_dir or Path.cwd())

    cli_config = RunConfig(all=command.all, verbose=command.verbose)
    resolved = ConfigResolver(source, DEFAULT_DECODERS).resolve()

    for warning in resolved.warnings:
        console.warning(warning)
    if resolved.fmt is not None:
        console.notice(f"Using {resolved.fmt.name} config.")

    effective = resolved.effective(cli_config)
    run_import(effective.verbose, effective.all, print)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    source: ConfigSource | None = None,
) -> int:
    """Run the 3xd CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    source:
        Config source to resolve against.  When ``None`` (default), the
        ```--config-dir``` directory (or the working directory) is used.
        Accepting *source* enables deterministic testing without touching
        the real filesystem.

    Returns
    -------
    int
        OS process exit code.
    """
    parser, command_parsers = _build_parser()
    command = parse_command(parser, argv)

    if isinstance(command, ShowHelp):
        parser.print_help()
        return exit_codes.SUCCESS

    if isinstance(command, ShowMan):
        return _handle_man(command_parsers)

    return _handle_import(command, source)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: run :func:`main` and exit with its code.

    A broken config file ends in ``Error:``/``Hint:`` lines on stderr and
    exit code 1.  Anything else that escapes :func:`main` is reported
    in one line rather than as a traceback.
    """
    try:
        code = main()
    except ThreexdError as exc:
        console.error(str(exc), hint=exc.hint)
        code = exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        code = exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console.labelled(
            "Unexpected error.",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        code = exit_codes.UNEXPECTED_ERROR
    sys.exit(code)
