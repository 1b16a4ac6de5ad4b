"""stardate-cli — calendar date to stardate converter.

Converts dates to stardates and back against a configurable, persisted
reference base year.
"""

from stardate_cli.version import __version__

__all__: list[str] = ["__version__"]
