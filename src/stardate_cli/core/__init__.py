"""Core layer — pure date/stardate arithmetic and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem access and no clock reads.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from stardate_cli.core.models import Conversion
from stardate_cli.core.protocols import BaseYearStore
from stardate_cli.core.stardate import (
    convert_date,
    convert_stardate,
    date_to_stardate,
    days_in_year,
    format_date,
    format_stardate,
    is_leap_year,
    parse_date,
    parse_integer,
    stardate_to_date,
)

__all__: list[str] = [
    "BaseYearStore",
    "Conversion",
    "convert_date",
    "convert_stardate",
    "date_to_stardate",
    "days_in_year",
    "format_date",
    "format_stardate",
    "is_leap_year",
    "parse_date",
    "parse_integer",
    "stardate_to_date",
]
