"""Text decoders for the supported config formats.

This module is the **only** place in the codebase that imports
``yaml``.  Decoding errors from ``json`` and PyYAML are re-raised as
:class:`~threexd.exceptions.ConfigParseError`.
"""

from __future__ import annotations

import functools
import json
import re
from typing import Any

from threexd.core.config_resolver import Decoder
from threexd.core.models import ConfigFormat
from threexd.exceptions import ConfigParseError, EnvironmentError


def decode_json(text: str) -> Any:
    """Decode ``config.json`` text."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(
            f"Malformed JSON in {ConfigFormat.JSON.file_name}: {exc}",
            hint=f"Compare it with {ConfigFormat.JSON.template_name}.",
        ) from exc


@functools.cache
def _yaml_loader() -> type[Any]:
    """``SafeLoader`` that also reads ``y``/``Y``/``n``/``N`` as booleans.

    PyYAML follows YAML 1.1 for ``yes``/``no``/``on``/``off`` but leaves
    the single-letter forms as strings; config files written for other
    YAML 1.1 readers use them.
    """
    import yaml

    class ConfigLoader(yaml.SafeLoader):
        bool_values = {**yaml.SafeLoader.bool_values, "y": True, "n": False}

    ConfigLoader.add_implicit_resolver(
        "tag:yaml.org,2002:bool",
        re.compile(r"^(?:y|Y|n|N)$"),
        list("yYnN"),
    )
    return ConfigLoader


def decode_yaml(text: str) -> Any:
    """Decode ``config.yaml`` text with a ``SafeLoader`` subclass."""
    try:
        import yaml
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "PyYAML is not installed. Install with: pip install PyYAML",
        ) from exc

    try:
        return yaml.load(text, Loader=_yaml_loader())  # noqa: S506
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            f"Malformed YAML in {ConfigFormat.YAML.file_name}: {exc}",
            hint=f"Compare it with {ConfigFormat.YAML.template_name}.",
        ) from exc


DEFAULT_DECODERS: dict[ConfigFormat, Decoder] = {
    ConfigFormat.JSON: decode_json,
    ConfigFormat.YAML: decode_yaml,
}
