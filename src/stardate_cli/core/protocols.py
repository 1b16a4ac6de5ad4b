"""Protocols (interfaces) consumed by the CLI and core layers.

These define the contracts that infrastructure adapters must satisfy.
Callers depend ONLY on these protocols — never on concrete
implementations — so tests can swap in an in-memory store.
"""

from __future__ import annotations

from typing import Protocol


class BaseYearStore(Protocol):
    """Contract for persisted base-year storage.

    Any object that implements :meth:`load` and :meth:`save` with the
    correct signatures satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def load(self) -> int:
        """Return the persisted base year.

        Implementations must never raise: any read or parse failure
        yields the store's default year instead.
        """
        ...  # pragma: no cover

    def save(self, year: int) -> None:
        """Persist *year*, replacing any previous value.

        Raises
        ------
        ConfigWriteError
            When the value cannot be written.
        """
        ...  # pragma: no cover
