"""``3xd man`` — long-form description of the tool.

The fixed introduction is followed by the generated ``--help`` output
of every runnable command, so option descriptions never drift from the
parser definitions.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping

MAN_HEAD: str = """\
3xd is a tool for extracting information row by row. A number of commands and options are supported.
3xd supports config files in JSON and YAML format. Please check config_template.[json/yaml]. If a config is present in the
config directory (the working directory unless -C/--config-dir is given) then the arguments will be provided from there.
Note that the JSON file has priority over the YAML file.
To get help for all the commands use $ 3xd [-h | --help].
To get help for an individual command use $ 3xd <command> [-h | --help]."""

DOCUMENTED_COMMANDS: tuple[str, ...] = ("import", "sync")


def render_man(command_parsers: Mapping[str, argparse.ArgumentParser]) -> str:
    """Return the man text: :data:`MAN_HEAD` plus per-command help."""
    sections = [MAN_HEAD]
    for name in DOCUMENTED_COMMANDS:
        sections.append(command_parsers[name].format_help().rstrip("\n"))
    return "\n\n".join(sections)
