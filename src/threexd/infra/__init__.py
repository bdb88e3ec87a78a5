"""Infrastructure layer — filesystem access and file-format decoding.

Every raw library exception must be caught here and re-raised as a
:class:`~threexd.exceptions.ThreexdError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from threexd.infra.config_source import DirectoryConfigSource
from threexd.infra.decoders import DEFAULT_DECODERS, decode_json, decode_yaml

__all__: list[str] = [
    "DEFAULT_DECODERS",
    "DirectoryConfigSource",
    "decode_json",
    "decode_yaml",
]
