"""Core config resolver — decides which config file, if any, applies.

The resolver depends on a :class:`~threexd.core.protocols.ConfigSource`
and on one decoder per :class:`~threexd.core.models.ConfigFormat`, all
injected at construction time.  It never touches the filesystem or a
parsing library directly.

Guarantees
----------
* ``config.json`` wins over ``config.yaml``; when both exist a warning
  is recorded on the result.
* A file that exists but cannot be read or parsed is fatal: only
  :class:`~threexd.exceptions.ConfigError` subclasses escape, and no
  partial config is ever returned.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from threexd.core.models import ConfigFormat, ResolvedConfig, RunConfig
from threexd.core.protocols import ConfigSource
from threexd.exceptions import ConfigParseError, ConfigReadError, ThreexdError

Decoder = Callable[[str], Any]
"""Turns raw file text into a document (``dict``, ``None``, ...)."""

BOTH_PRESENT_WARNING: str = (
    "both config.json and config.yaml are present. "
    "In such a case the JSON file is prioritised."
)

_SETTING_KEYS: tuple[str, ...] = ("all", "verbose")


class ConfigResolver:
    """Locate, decode and validate the config file for one run.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`ConfigSource` protocol.
    decoders:
        Decoder for every :class:`ConfigFormat`.
    """

    def __init__(
        self,
        source: ConfigSource,
        decoders: Mapping[ConfigFormat, Decoder],
    ) -> None:
        missing = [fmt.name for fmt in ConfigFormat if fmt not in decoders]
        if missing:
            raise ValueError(f"No decoder registered for: {', '.join(missing)}")
        self._source: ConfigSource = source
        self._decoders: dict[ConfigFormat, Decoder] = dict(decoders)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self) -> ResolvedConfig:
        """Return the config file settings, or an absent result.

        Raises
        ------
        ConfigReadError
            If the chosen file exists but cannot be read.
        ConfigParseError
            If the chosen file is malformed or has the wrong shape.
        """
        found = [fmt for fmt in ConfigFormat if self._source.exists(fmt.file_name)]
        if not found:
            return ResolvedConfig()

        warnings: tuple[str, ...] = ()
        if len(found) > 1:
            warnings = (BOTH_PRESENT_WARNING,)

        chosen = found[0]
        return ResolvedConfig(
            config=self._load(chosen),
            fmt=chosen,
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Loading (safe boundary)
    # ------------------------------------------------------------------

    def _load(self, fmt: ConfigFormat) -> RunConfig:
        text = self._read(fmt)
        try:
            document = self._decoders[fmt](text)
        except ThreexdError:
            raise
        except Exception as exc:
            raise ConfigParseError(
                f"Could not parse {fmt.file_name}: {exc}",
                hint=f"Compare it with {fmt.template_name}.",
            ) from exc
        return parse_run_config(document, fmt)

    def _read(self, fmt: ConfigFormat) -> str:
        """Call the source and ensure only our exceptions escape."""
        try:
            return self._source.read_text(fmt.file_name)
        except ThreexdError:
            raise
        except Exception as exc:
            raise ConfigReadError(
                f"Could not read {fmt.file_name}: {exc}",
            ) from exc


# ---------------------------------------------------------------------------
# Document → RunConfig (pure)
# ---------------------------------------------------------------------------

def parse_run_config(document: Any, fmt: ConfigFormat) -> RunConfig:
    """Validate a decoded document and build a :class:`RunConfig`.

    * ``None`` (empty YAML, JSON ``null``) yields all-false settings.
    * Missing keys and ``null`` values default to ``False``.
    * Unknown keys are ignored.
    * JSON keys match case-insensitively; when several spellings are
      present the last one in the document wins.

    Raises
    ------
    ConfigParseError
        If the document is not a mapping or a setting is not a boolean.
    """
    if document is None:
        return RunConfig()

    if not isinstance(document, dict):
        raise ConfigParseError(
            f"Invalid {fmt.file_name}: expected a mapping, "
            f"got {type(document).__name__}",
            hint=f"Compare it with {fmt.template_name}.",
        )

    values: dict[str, bool] = {}
    for key in _SETTING_KEYS:
        values[key] = False
        for raw in _matches(document, key, fold_case=fmt is ConfigFormat.JSON):
            if not isinstance(raw, bool):
                raise ConfigParseError(
                    f"Invalid {fmt.file_name}: '{key}' must be a boolean, "
                    f"got {type(raw).__name__} {raw!r}",
                    hint=f"Compare it with {fmt.template_name}.",
                )
            values[key] = raw

    return RunConfig(all=values["all"], verbose=values["verbose"])


def _matches(document: dict[Any, Any], key: str, *, fold_case: bool) -> list[Any]:
    """Non-null values stored under *key*, in document order.

    With *fold_case* every key equal to *key* ignoring case matches, so a
    later spelling overrides an earlier one.
    """
    if not fold_case:
        value = document.get(key)
        return [] if value is None else [value]
    return [
        value
        for candidate, value in document.items()
        if isinstance(candidate, str) and candidate.lower() == key and value is not None
    ]
