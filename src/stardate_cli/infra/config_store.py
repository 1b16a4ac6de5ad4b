"""Infrastructure: file-backed persistence of the reference base year.

The config file holds a single plain-text integer.  Reads are forgiving
— any failure falls back to :data:`DEFAULT_BASE_YEAR` — while writes
are strict and surface failures as :class:`ConfigWriteError`.

Rules
-----
* The file path is always injected; nothing here reads a hidden global.
* Read failures are logged at DEBUG level and never raised.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from stardate_cli.core.stardate import parse_integer
from stardate_cli.exceptions import ConfigWriteError

logger = logging.getLogger(__name__)

DEFAULT_BASE_YEAR: int = 2323
"""Base year used when no valid config value exists."""

CONFIG_FILE_NAME: str = ".stardate-cli-config"
"""File name of the config file inside the user's home directory."""

CONFIG_PATH_ENV: str = "STARDATE_CLI_CONFIG"
"""Environment variable that overrides the config file location."""


def default_config_path() -> Path | None:
    """Return the config file location for the current user.

    ``$STARDATE_CLI_CONFIG`` wins when set and non-empty; otherwise the
    file lives directly in the home directory.  Returns ``None`` when no
    home directory can be determined.
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    try:
        return Path.home() / CONFIG_FILE_NAME
    except RuntimeError:
        logger.debug("Home directory could not be determined")
        return None


class FileBaseYearStore:
    """Load/save the base year from a single-value text file.

    Satisfies :class:`~stardate_cli.core.protocols.BaseYearStore`.  A
    ``None`` path means no location is known: loads return the default
    and saves fail.
    """

    def __init__(self, path: Path | None, *, default: int = DEFAULT_BASE_YEAR) -> None:
        self.path = path
        self.default = default

    def load(self) -> int:
        """Return the stored year, or :attr:`default` on any failure."""
        if self.path is None:
            return self.default

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug(
                "Config %s not readable (%s); using default %d",
                self.path, exc, self.default,
            )
            return self.default

        try:
            year = parse_integer(raw.strip())
        except ValueError:
            logger.debug(
                "Config %s holds %r, not a year; using default %d",
                self.path, raw, self.default,
            )
            return self.default

        logger.debug("Loaded base year %d from %s", year, self.path)
        return year

    def save(self, year: int) -> None:
        """Overwrite the config file with *year*.

        Raises
        ------
        ConfigWriteError
            When there is no config location, or the directory cannot be
            created, or the file cannot be written.
        """
        if self.path is None:
            raise ConfigWriteError(
                f"Could not save base year {year}: no home directory found.",
                hint=f"Set {CONFIG_PATH_ENV} or pass --config PATH.",
            )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(year), encoding="utf-8")
        except OSError as exc:
            raise ConfigWriteError(
                f"Could not save base year {year}: {exc.strerror or exc}",
                hint=f"Check that {self.path} is writable.",
            ) from exc
        logger.debug("Saved base year %d to %s", year, self.path)
