"""CLI application entry point and command routing for stardate-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~stardate_cli.exceptions.StardateCliError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here — all conversion work is delegated to
  :mod:`stardate_cli.core`, all persistence to :mod:`stardate_cli.infra`.
* ``print()`` is forbidden; the console proxies are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.

Dispatch order
--------------
The first matching rule wins:

1. no conversion flags  → current date/stardate summary
2. ``--help``           → handled by argparse
3. ``--show-base``      → print the persisted base year
4. ``--set-base``       → persist, then fall through to a conversion
5. ``--stardate``       → stardate → date
6. otherwise            → date → stardate (today when ``--date`` is omitted)
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path
from typing import NoReturn

from stardate_cli.cli import exit_codes
from stardate_cli.cli.console import console, err_console
from stardate_cli.cli.logging_setup import configure_logging
from stardate_cli.core.protocols import BaseYearStore
from stardate_cli.core.stardate import (
    convert_date,
    convert_stardate,
    format_date,
    format_stardate,
    parse_date,
    parse_integer,
)
from stardate_cli.exceptions import InvalidArgumentError, StardateCliError
from stardate_cli.infra.config_store import FileBaseYearStore, default_config_path
from stardate_cli.version import __version__

logger = logging.getLogger(__name__)

PROG = "stardate"

_EXAMPLES = f"""\
Examples:
  Convert a specific date to stardate:
    {PROG} --date 21-02-2025
  Convert a specific date to stardate using a temporary base year:
    {PROG} --date 21-02-2025 --base 2300
  Convert a stardate to human date:
    {PROG} --stardate 45000
  Update the reference base year:
    {PROG} --set-base 2300
  Show the current reference base year:
    {PROG} --show-base
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises :class:`InvalidArgumentError` instead of exiting.

    Routing usage errors through the error boundary keeps every bad-input
    path on :data:`exit_codes.GENERAL_ERROR`.
    """

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(
            message,
            hint=f"Run '{self.prog} --help' for usage.",
        )


def _year(text: str) -> int:
    try:
        return parse_integer(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid year: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Convert between calendar dates and stardates.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--date",
        metavar="DD-MM-YYYY",
        help="Human date to convert to stardate (defaults to the current date).",
    )
    parser.add_argument(
        "-s",
        "--stardate",
        type=float,
        metavar="STARDATE",
        help="Stardate value to convert to a human date.",
    )
    parser.add_argument(
        "-b",
        "--base",
        type=_year,
        metavar="YEAR",
        help="Temporary base year for this conversion only (not persisted).",
    )
    parser.add_argument(
        "--set-base",
        type=_year,
        metavar="YEAR",
        help="Set and persist a new base year for all future conversions.",
    )
    parser.add_argument(
        "--show-base",
        action="store_true",
        help="Display the current persistent base year.",
    )

    diagnostics = parser.add_argument_group("diagnostics")
    diagnostics.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logging to stderr.",
    )
    diagnostics.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log lines as JSON.",
    )
    diagnostics.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Config file holding the persistent base year.",
    )
    return parser


def _has_conversion_flags(args: argparse.Namespace) -> bool:
    return (
        args.date is not None
        or args.stardate is not None
        or args.base is not None
        or args.set_base is not None
        or args.show_base
    )


def _today() -> dt.date:
    return dt.date.today()


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_summary(persistent_base: int) -> int:
    """Show today's date and stardate plus a pointer to ``--help``."""
    conversion = convert_date(_today(), persistent_base)
    console.print(f"Current Date: {format_date(conversion.date)}")
    console.print(
        f"Current Stardate (using base year {conversion.base_year}): "
        f"{format_stardate(conversion.stardate)}"
    )
    console.print()
    console.print("For more details on available commands and usage, run:")
    console.print(f"  {PROG} -h or --help")
    return exit_codes.SUCCESS


def _handle_show_base(persistent_base: int) -> int:
    console.print(f"Current reference base year: {persistent_base}")
    return exit_codes.SUCCESS


def _handle_set_base(store: BaseYearStore, year: int) -> None:
    store.save(year)
    console.print(f"Reference base year updated to {year}")


def _handle_stardate(stardate: float, base_year: int) -> int:
    conversion = convert_stardate(stardate, base_year)
    console.print(
        f"Converted stardate {format_stardate(conversion.stardate)} to human date: "
        f"{format_date(conversion.date)} (using base year {conversion.base_year})"
    )
    return exit_codes.SUCCESS


def _handle_date(date_text: str | None, base_year: int) -> int:
    date = _today() if date_text is None else parse_date(date_text)
    conversion = convert_date(date, base_year)
    console.print(
        f"Converted date {format_date(conversion.date)} to stardate: "
        f"{format_stardate(conversion.stardate)} (using base year {conversion.base_year})"
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, store: BaseYearStore | None = None) -> int:
    """Run the stardate CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    store:
        Base-year store to use.  When ``None``, a file store at
        ``--config`` (or the default config path) is created.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    if store is None:
        store = FileBaseYearStore(args.config if args.config is not None else default_config_path())

    persistent_base = store.load()

    if not _has_conversion_flags(args):
        logger.debug("No conversion flags; showing summary")
        return _handle_summary(persistent_base)

    if args.show_base:
        return _handle_show_base(persistent_base)

    if args.set_base is not None:
        _handle_set_base(store, args.set_base)
        persistent_base = args.set_base

    base_year = args.base if args.base is not None else persistent_base
    logger.debug("Effective base year %d (persistent %d)", base_year, persistent_base)

    if args.stardate is not None:
        return _handle_stardate(args.stardate, base_year)

    return _handle_date(args.date, base_year)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except StardateCliError as exc:
        err_console.print_labeled("Error:", str(exc), style="bold red")
        if exc.hint:
            err_console.print_labeled("Hint:", exc.hint, style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print_labeled(
            "Unexpected error.",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
