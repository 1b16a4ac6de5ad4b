"""Custom exception hierarchy for stardate-cli.

All exceptions that cross layer boundaries must inherit from
:class:`StardateCliError`.  Raw ``OSError`` / ``ValueError`` instances
must NEVER propagate beyond the layer that produced them — they are
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
StardateCliError
├── InvalidDateError
├── InvalidArgumentError
├── StardateRangeError
├── ConfigError
│   └── ConfigWriteError
└── EnvironmentError
"""

from __future__ import annotations


class StardateCliError(Exception):
    """Base exception for all stardate-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidDateError(StardateCliError):
    """Raised when a ``DD-MM-YYYY`` date string cannot be parsed."""


class InvalidArgumentError(StardateCliError):
    """Raised when a command-line flag or its value is rejected."""


# --- Conversion ------------------------------------------------------------

class StardateRangeError(StardateCliError):
    """Raised when a conversion lands outside the supported calendar range."""


# --- Configuration ---------------------------------------------------------

class ConfigError(StardateCliError):
    """Base class for base-year config file failures."""


class ConfigWriteError(ConfigError):
    """Raised when the base year cannot be persisted."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(StardateCliError):
    """Raised when an optional runtime dependency is not available."""
