"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem access and no third-party imports.
* No imports from ``cli`` or ``infra``.
"""

from threexd.core.config_resolver import ConfigResolver, parse_run_config
from threexd.core.import_runner import import_lines, run_import
from threexd.core.models import ConfigFormat, ResolvedConfig, RunConfig
from threexd.core.protocols import ConfigSource

__all__: list[str] = [
    "ConfigFormat",
    "ConfigResolver",
    "ConfigSource",
    "ResolvedConfig",
    "RunConfig",
    "import_lines",
    "parse_run_config",
    "run_import",
]
