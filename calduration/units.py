"""Canonical duration units and name resolution.

Units are resolved from canonical singular/plural names and short aliases,
case-insensitively. The lookup table is read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Literal, TypeAlias

from calduration.errors import UnknownUnitError
from calduration.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND, WEEK

UnitName: TypeAlias = Literal[
    "millisecond",
    "second",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "year",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
]


class Unit(str, Enum):
    """Duration units, smallest first."""

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def is_calendar(self) -> bool:
        """Week, month and year are stored with the calendar fields."""
        return self in (Unit.WEEK, Unit.MONTH, Unit.YEAR)

    @property
    def fixed_ms(self) -> int | None:
        """Exact length in milliseconds, or None for month and year."""
        return _FIXED_MS.get(self)


_FIXED_MS: dict[Unit, int] = {
    Unit.MILLISECOND: MILLISECOND,
    Unit.SECOND: SECOND,
    Unit.MINUTE: MINUTE,
    Unit.HOUR: HOUR,
    Unit.DAY: DAY,
    Unit.WEEK: WEEK,
}

# Short spellings accepted in addition to the singular/plural names
_SHORT_NAMES: dict[str, Unit] = {
    "ms": Unit.MILLISECOND,
    "msec": Unit.MILLISECOND,
    "msecs": Unit.MILLISECOND,
    "millis": Unit.MILLISECOND,
    "s": Unit.SECOND,
    "sec": Unit.SECOND,
    "secs": Unit.SECOND,
    "m": Unit.MINUTE,
    "min": Unit.MINUTE,
    "mins": Unit.MINUTE,
    "h": Unit.HOUR,
    "hr": Unit.HOUR,
    "hrs": Unit.HOUR,
    "d": Unit.DAY,
    "w": Unit.WEEK,
    "wk": Unit.WEEK,
    "wks": Unit.WEEK,
    "mo": Unit.MONTH,
    "mon": Unit.MONTH,
    "mos": Unit.MONTH,
    "y": Unit.YEAR,
    "yr": Unit.YEAR,
    "yrs": Unit.YEAR,
}


def _build_aliases() -> dict[str, Unit]:
    table: dict[str, Unit] = {}
    for unit in Unit:
        table[unit.value] = unit
        table[unit.plural] = unit
    table.update(_SHORT_NAMES)
    return table


ALIASES: MappingProxyType[str, Unit] = MappingProxyType(_build_aliases())


def resolve(name: "str | Unit") -> Unit:
    """Resolve a unit name or alias to a Unit.

    Args:
        name: Unit, canonical name ("hour"), plural ("hours") or alias ("hr")

    Raises:
        UnknownUnitError: If the name is not a known unit
    """
    if isinstance(name, Unit):
        return name
    if isinstance(name, str):
        unit = ALIASES.get(name.strip().lower())
        if unit is not None:
            return unit
    valid = ", ".join(unit.value for unit in Unit)
    raise UnknownUnitError(name, valid)


__all__ = ["ALIASES", "Unit", "UnitName", "resolve"]
