"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem.  Every raw
``OSError`` must be caught here and either absorbed (reads) or re-raised
as a :class:`~stardate_cli.exceptions.StardateCliError` subclass (writes).

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from stardate_cli.infra.config_store import (
    CONFIG_FILE_NAME,
    DEFAULT_BASE_YEAR,
    FileBaseYearStore,
    default_config_path,
)

__all__: list[str] = [
    "CONFIG_FILE_NAME",
    "DEFAULT_BASE_YEAR",
    "FileBaseYearStore",
    "default_config_path",
]
