"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and plain conversions keep
working even when Rich is not installed.

Two proxies are exported: :data:`console` writes results to stdout and
:data:`err_console` writes errors and hints to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from stardate_cli.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = False) -> Any:
    """Create a Rich console bound to the current stdout or stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool = False) -> None:
        self._stderr = stderr

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain print."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*objects, file=stream)
            return
        rich_console.print(*objects, soft_wrap=True)

    def print_labeled(self, label: str, text: str, *, style: str) -> None:
        """Print a styled *label* followed by *text* rendered literally.

        *text* often echoes user input, so Rich markup inside it is
        escaped rather than interpreted.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(f"{label} {text}".rstrip(), file=stream)
            return
        from rich.markup import escape

        rich_console.print(f"[{style}]{label}[/{style}] {escape(text)}".rstrip(), soft_wrap=True)


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
