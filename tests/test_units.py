"""Tests for unit name resolution."""

import pytest

from calduration import RangeError, Unit, UnknownUnitError, resolve
from calduration.units import ALIASES


@pytest.mark.parametrize(
    "name, expected",
    [
        ("hour", Unit.HOUR),
        ("hours", Unit.HOUR),
        ("HR", Unit.HOUR),
        ("  Minutes ", Unit.MINUTE),
        ("ms", Unit.MILLISECOND),
        ("sec", Unit.SECOND),
        ("wk", Unit.WEEK),
        ("mo", Unit.MONTH),
        ("yr", Unit.YEAR),
        ("Years", Unit.YEAR),
    ],
)
def test_resolve_names_and_aliases(name, expected):
    """Canonical names, plurals and aliases resolve case-insensitively."""
    assert resolve(name) is expected


def test_resolve_passes_units_through():
    assert resolve(Unit.DAY) is Unit.DAY


def test_resolve_unknown_unit():
    """Unknown names raise UnknownUnitError listing the valid units."""
    with pytest.raises(UnknownUnitError, match="Unknown duration unit: 'fortnight'"):
        resolve("fortnight")

    with pytest.raises(UnknownUnitError, match="Valid units: millisecond, second"):
        resolve(5)  # type: ignore[arg-type]


def test_unknown_unit_error_is_lookup_and_range_error():
    """UnknownUnitError can be caught as KeyError or RangeError."""
    with pytest.raises(KeyError):
        resolve("lightyear")
    with pytest.raises(RangeError):
        resolve("lightyear")


def test_unit_properties():
    assert Unit.WEEK.is_calendar
    assert Unit.MONTH.is_calendar
    assert not Unit.DAY.is_calendar
    assert Unit.DAY.fixed_ms == 86400000
    assert Unit.WEEK.fixed_ms == 604800000
    assert Unit.MONTH.fixed_ms is None
    assert Unit.HOUR.plural == "hours"


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        ALIASES["fortnight"] = Unit.WEEK  # type: ignore[index]
