"""3xd — row-by-row import simulator.

Settings come from the command line or from a ``config.json`` /
``config.yaml`` file that overrides them.
"""

from threexd.version import __version__

__all__: list[str] = ["__version__"]
