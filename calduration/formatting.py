"""Pluggable human-readable rendering of durations.

The core never embeds pluralization tables; ``Duration.to_locale_string``
calls through a ``LocaleFormatter``. Both built-in formatters produce text
the unit-term parser reads back ("1 day, 2 hours", "1d 2h").
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from typing_extensions import override

from calduration.util import decimal_context

if TYPE_CHECKING:
    from calduration.duration import Duration


@decimal_context
def _fields(duration: "Duration") -> list[tuple[str, int | Decimal]]:
    """Non-zero (unit name, amount) pairs, largest unit first."""
    seconds = duration.seconds + duration.fraction
    pairs: list[tuple[str, int | Decimal]] = [
        ("year", duration.years),
        ("month", duration.months),
        ("week", duration.weeks),
        ("day", duration.days),
        ("hour", duration.hours),
        ("minute", duration.minutes),
        ("second", seconds.normalize() if duration.fraction else duration.seconds),
    ]
    return [(name, amount) for name, amount in pairs if amount]


def _number(amount: int | Decimal) -> str:
    return format(amount, "f") if isinstance(amount, Decimal) else str(amount)


class LocaleFormatter(ABC):
    """Renders a Duration for a locale."""

    @abstractmethod
    def format(self, duration: "Duration", locale: str | None = None) -> str:
        pass


class PlainFormatter(LocaleFormatter):
    """English unit names with simple pluralization: "1 day, 2 hours".

    The locale argument is accepted and ignored.
    """

    def __init__(self, separator: str = ", "):
        self.separator: str = separator

    @override
    def format(self, duration: "Duration", locale: str | None = None) -> str:
        parts = [
            f"{_number(amount)} {name if amount == 1 else name + 's'}"
            for name, amount in _fields(duration)
        ]
        text = self.separator.join(parts) or "0 seconds"
        return f"-{text}" if duration.sign < 0 else text


# Short unit symbols; "mo" keeps months apart from minutes
_SYMBOLS = {
    "year": "y",
    "month": "mo",
    "week": "w",
    "day": "d",
    "hour": "h",
    "minute": "m",
    "second": "s",
}


class CompactFormatter(LocaleFormatter):
    """Unit symbols without spaces: "1d 2h 30m"."""

    @override
    def format(self, duration: "Duration", locale: str | None = None) -> str:
        text = " ".join(
            f"{_number(amount)}{_SYMBOLS[name]}" for name, amount in _fields(duration)
        )
        text = text or "0s"
        return f"-{text}" if duration.sign < 0 else text


__all__ = ["CompactFormatter", "LocaleFormatter", "PlainFormatter"]
