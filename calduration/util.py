"""Utility constants and the calendar approximation policy for calduration.

Time unit constants represent fixed lengths in milliseconds. Only day and the
smaller units are exact; month and year lengths are averages and live in
``ApproximationPolicy`` so they can be revised without touching parsing or
equality.
"""

from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from functools import wraps
from typing import Any, TypeVar

T = TypeVar("T")

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000
WEEK = 604800000

# Carry ratios between neighbouring units
MILLISECONDS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12

SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY

# Field arithmetic runs at this precision whatever the caller's decimal context
FIELD_PRECISION = 64
DECIMAL_CONTEXT = Context(prec=FIELD_PRECISION, rounding=ROUND_HALF_EVEN)


def decimal_context(func: Callable[..., T]) -> Callable[..., T]:
    """Run ``func`` under ``DECIMAL_CONTEXT`` instead of the thread's context."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        with localcontext(DECIMAL_CONTEXT):
            return func(*args, **kwargs)

    return wrapper


@dataclass(frozen=True, kw_only=True)
class ApproximationPolicy:
    """Fixed-point ratios used to express calendar units in milliseconds.

    Attributes:
        days_per_year: Average Gregorian year (400-year cycle) in days
        months_per_year: Months in a year; a month is ``year / months_per_year``
    """

    days_per_year: Decimal = Decimal("365.2425")
    months_per_year: int = MONTHS_PER_YEAR

    def __post_init__(self) -> None:
        if self.days_per_year <= 0 or self.months_per_year <= 0:
            raise ValueError(
                f"Approximation ratios must be positive, got "
                f"days_per_year={self.days_per_year}, "
                f"months_per_year={self.months_per_year}"
            )

    @property
    def year_ms(self) -> Decimal:
        return self.days_per_year * DAY

    @property
    def month_ms(self) -> Decimal:
        return self.year_ms / self.months_per_year


DEFAULT_POLICY = ApproximationPolicy()
