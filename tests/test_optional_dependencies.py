"""Regression tests for optional runtime dependencies (rich / PyYAML).

Bootstrap commands must keep working without either library.  Console
output falls back to plain stderr without Rich; YAML configs fail with
a typed environment error when PyYAML is missing.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

import pytest

from threexd.cli import exit_codes
from threexd.cli.app import main
from threexd.cli.console import console, strip_markup
from threexd.exceptions import EnvironmentError
from threexd.infra.decoders import decode_yaml

SourceFactory = Callable[..., Any]


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def _hide_yaml(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "yaml", None)


def test_help_works_without_rich_or_yaml(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_yaml(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_man_works_without_rich_or_yaml(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_yaml(monkeypatch)

    assert main(["man"]) == exit_codes.SUCCESS


def test_warning_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    make_source: SourceFactory,
) -> None:
    _hide_rich(monkeypatch)
    source = make_source(
        {"config.json": '{"all": true}', "config.yaml": "all: false\n"}
    )

    assert main(["import"], source=source) == exit_codes.SUCCESS
    captured = capsys.readouterr()
    assert "WARNING: both config.json and config.yaml are present." in captured.err
    assert "[bold" not in captured.err
    assert "Using JSON config." in captured.err


def test_json_config_works_without_yaml(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    make_source: SourceFactory,
) -> None:
    _hide_yaml(monkeypatch)
    source = make_source({"config.json": '{"all": true}'})

    assert main(["sync"], source=source) == exit_codes.SUCCESS
    assert capsys.readouterr().out.startswith("[All] Import begins...")


def test_yaml_config_raises_environment_error_without_yaml(
    monkeypatch: pytest.MonkeyPatch,
    make_source: SourceFactory,
) -> None:
    _hide_yaml(monkeypatch)
    source = make_source({"config.yaml": "all: true\n"})

    with pytest.raises(EnvironmentError, match="PyYAML is not installed"):
        main(["sync"], source=source)


def test_decode_yaml_raises_environment_error_without_yaml(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_yaml(monkeypatch)

    with pytest.raises(EnvironmentError, match="PyYAML is not installed"):
        decode_yaml("all: true\n")


def test_strip_markup_keeps_report_prefix() -> None:
    assert strip_markup("[bold yellow]WARNING:[/bold yellow] [All] x") == "WARNING: [All] x"


def test_console_notice_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.notice("Using YAML config.")
    assert capsys.readouterr().err == "Using YAML config.\n"


def test_error_text_is_printed_verbatim_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.error("bad [red]value[/red] in [/x", hint="see [dim]template")
    assert capsys.readouterr().err == (
        "Error: bad [red]value[/red] in [/x\nHint: see [dim]template\n"
    )


def test_error_text_is_not_parsed_as_markup_with_rich(
    capsys: pytest.CaptureFixture[str],
) -> None:
    pytest.importorskip("rich")

    console.warning("stray [/x tag")
    console.error("line [bold]1[/bold]", hint="[/yellow]")
    err = capsys.readouterr().err
    assert "WARNING: stray [/x tag" in err
    assert "Error: line [bold]1[/bold]" in err
    assert "Hint: [/yellow]" in err
