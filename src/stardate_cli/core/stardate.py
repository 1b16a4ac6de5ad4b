"""Pure date ↔ stardate arithmetic and ``DD-MM-YYYY`` parsing.

Every function in this module is a **pure** transformation — no I/O,
no clock access, fully deterministic, and trivially unit-testable.

Formula
-------
``stardate = 1000 * (year - base_year) + day_of_year / days_in_year * 1000``

The inverse rounds the day of year half-up, so a round trip is exact
only to within one day.
"""

from __future__ import annotations

import datetime as dt
import math
import re

from stardate_cli.core.models import Conversion
from stardate_cli.exceptions import InvalidDateError, StardateRangeError

DATE_FORMAT_HINT = "Use DD-MM-YYYY, e.g. 21-02-2025."

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> int:
    """Parse an optionally signed run of ASCII digits.

    Stricter than :func:`int`, which also accepts underscores and
    non-ASCII digits.

    Raises
    ------
    ValueError
        When *text* is anything else.
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def date_to_stardate(date: dt.date, base_year: int) -> float:
    """Return the stardate for *date* relative to *base_year*.

    Raises
    ------
    StardateRangeError
        When the year difference is too large to represent as a float.
    """
    day_of_year = date.timetuple().tm_yday
    total_days = days_in_year(date.year)
    try:
        year_offset = float(date.year - base_year)
    except OverflowError as exc:
        raise StardateRangeError(
            f"Base year {base_year} is too far from {format_date(date)} "
            "to compute a stardate.",
            hint="Pick a different base year with --base.",
        ) from exc
    return 1000 * year_offset + (day_of_year / total_days) * 1000


def stardate_to_date(stardate: float, base_year: int) -> dt.date:
    """Return the calendar date for *stardate* relative to *base_year*.

    The day of year is rounded half-up; a result of day 0 lands on
    31 December of the preceding year.

    Raises
    ------
    StardateRangeError
        When the result falls outside years 1..9999.
    """
    if not math.isfinite(stardate):
        raise _out_of_range(stardate, base_year)

    year_offset = math.floor(stardate / 1000)
    year = base_year + year_offset
    fraction = stardate - year_offset * 1000
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise _out_of_range(stardate, base_year)

    day_of_year = math.floor(fraction / 1000 * days_in_year(year) + 0.5)
    try:
        return dt.date(year, 1, 1) + dt.timedelta(days=day_of_year - 1)
    except OverflowError as exc:
        raise _out_of_range(stardate, base_year) from exc


def _out_of_range(stardate: float, base_year: int) -> StardateRangeError:
    return StardateRangeError(
        f"Stardate {stardate:.2f} with base year {base_year} is outside "
        f"the supported calendar range ({dt.MINYEAR}-{dt.MAXYEAR}).",
        hint="Pick a different base year with --base.",
    )


def convert_date(date: dt.date, base_year: int) -> Conversion:
    return Conversion(
        date=date,
        stardate=date_to_stardate(date, base_year),
        base_year=base_year,
    )


def convert_stardate(stardate: float, base_year: int) -> Conversion:
    return Conversion(
        date=stardate_to_date(stardate, base_year),
        stardate=stardate,
        base_year=base_year,
    )


# ---------------------------------------------------------------------------
# Text formats
# ---------------------------------------------------------------------------

def parse_date(text: str) -> dt.date:
    """Parse a ``DD-MM-YYYY`` string into a :class:`datetime.date`.

    Impossible calendar dates such as ``31-02-2024`` are rejected rather
    than rolled over into the following month.

    Raises
    ------
    InvalidDateError
        On a wrong number of components, non-numeric components, or a
        date that does not exist.
    """
    parts = text.strip().split("-")
    if len(parts) != 3:
        raise InvalidDateError(
            f"Invalid date format {text!r}, expected DD-MM-YYYY.",
            hint=DATE_FORMAT_HINT,
        )
    try:
        day, month, year = (parse_integer(part) for part in parts)
    except ValueError as exc:
        raise InvalidDateError(
            f"Invalid date {text!r}, must be numbers in DD-MM-YYYY format.",
            hint=DATE_FORMAT_HINT,
        ) from exc
    try:
        return dt.date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(
            f"Invalid date {text!r}: {exc}.",
            hint=DATE_FORMAT_HINT,
        ) from exc


def format_date(date: dt.date) -> str:
    """Render *date* as ``DD-MM-YYYY``."""
    return f"{date.day:02d}-{date.month:02d}-{date.year:04d}"


def format_stardate(stardate: float) -> str:
    return f"{stardate:.2f}"
