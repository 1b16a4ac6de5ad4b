"""Tests for domain models (core/models.py).

``Conversion`` is a frozen dataclass — these tests verify immutability
and equality semantics.
"""

from __future__ import annotations

import datetime as dt

import pytest

from stardate_cli.core.models import Conversion


def _make_conversion(**overrides: object) -> Conversion:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "date": dt.date(2325, 1, 1),
        "stardate": 2002.74,
        "base_year": 2323,
    }
    defaults.update(overrides)
    return Conversion(**defaults)  # type: ignore[arg-type]


class TestConversion:
    def test_fields_accessible(self) -> None:
        c = _make_conversion()
        assert c.date == dt.date(2325, 1, 1)
        assert c.stardate == 2002.74
        assert c.base_year == 2323

    def test_frozen(self) -> None:
        c = _make_conversion()
        with pytest.raises(AttributeError):
            c.base_year = 2000  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_conversion() == _make_conversion()

    def test_inequality(self) -> None:
        assert _make_conversion(base_year=2000) != _make_conversion(base_year=2323)

    def test_hashable(self) -> None:
        assert len({_make_conversion(), _make_conversion()}) == 1
