"""Domain models for stardate-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Conversion:
    """One date/stardate pair computed against a base year."""

    date: dt.date
    """Calendar date (local time, day precision)."""

    stardate: float
    """Stardate corresponding to :attr:`date`."""

    base_year: int
    """Calendar year mapped to stardate 0 for this conversion."""
