"""Applying durations to dates and measuring durations between dates.

Calendar stepping is delegated to python-dateutil's relativedelta, which clamps
the day of month (Jan 31 + 1 month = Feb 28). Zone rules come from the value's
own ``tzinfo`` (typically ``zoneinfo.ZoneInfo``); nothing here knows about DST.

Field application order:
    1. years, then months (day of month clamped)
    2. weeks and days, on the wall clock
    3. hours, minutes, seconds and fraction, as elapsed time
"""

import logging
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, TypeVar

from dateutil.relativedelta import relativedelta

from calduration.duration import Duration, DurationInput
from calduration.units import Unit
from calduration.util import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    decimal_context,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)

_MICROSECONDS_PER_SECOND = 1_000_000


def _check_value(value: Any, name: str) -> None:
    if not isinstance(value, date):
        raise TypeError(
            f"{name} must be a date or datetime, got {type(value).__name__!r}: {value!r}\n"
            f"Examples: date(2019, 1, 31), "
            f"datetime(2025, 3, 9, 1, 30, tzinfo=ZoneInfo('US/Pacific'))"
        )


def _resolve_wall_clock(value: D) -> D:
    """Pass an aware wall-clock time through its zone's rules.

    Times inside a DST gap do not exist; they move forward by the size of
    the gap.
    """
    if not isinstance(value, datetime) or value.tzinfo is None:
        return value
    resolved = value.astimezone(timezone.utc).astimezone(value.tzinfo)
    if resolved.replace(tzinfo=None) != value.replace(tzinfo=None):
        logger.debug("Wall-clock time %s does not exist; resolved to %s", value, resolved)
    return resolved  # type: ignore[return-value]


def _instant(value: date) -> date:
    """Comparable form: aware datetimes compare as UTC instants."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc)
    return value


def _shift(value: D, **calendar: int) -> D:
    return _resolve_wall_clock(value + relativedelta(**calendar))


@decimal_context
def _elapsed(duration: Duration) -> timedelta:
    microseconds = int(duration.fraction * _MICROSECONDS_PER_SECOND)
    return timedelta(
        hours=duration.hours,
        minutes=duration.minutes,
        seconds=duration.seconds,
        microseconds=microseconds,
    )


def date_add(value: D, duration: DurationInput) -> D:
    """Return ``value`` moved by ``duration``.

    Plain dates take whole days from the time fields (truncated toward zero);
    the sub-day remainder is dropped. For aware datetimes the time fields are
    added as elapsed time, so adding an hour across a DST change moves the
    wall clock by zero or two hours. Sub-microsecond fractions are truncated.

    Examples:
        >>> date_add(date(2019, 1, 31), Duration("P1M"))
        datetime.date(2019, 2, 28)
    """
    _check_value(value, "date_add() value")
    duration = duration if isinstance(duration, Duration) else Duration(duration)
    sign = duration.sign
    elapsed = _elapsed(duration)

    days = duration.days
    if not isinstance(value, datetime):
        days += elapsed // timedelta(days=1)
        elapsed = timedelta(0)

    # Calendar fields step on the wall clock through relativedelta
    calendar = {
        unit.plural: sign * duration.get(unit) for unit in Unit if unit.is_calendar
    }
    shifted = _shift(value, days=sign * days, **calendar)
    if not elapsed:
        return shifted
    if isinstance(shifted, datetime) and shifted.tzinfo is not None:
        moved = shifted.astimezone(timezone.utc) + sign * elapsed
        return moved.astimezone(shifted.tzinfo)  # type: ignore[return-value]
    return shifted + sign * elapsed


def date_subtract(value: D, duration: DurationInput) -> D:
    """Return ``value`` moved back by ``duration``."""
    duration = duration if isinstance(duration, Duration) else Duration(duration)
    return date_add(value, duration.negate())


@decimal_context
def between(start: date, end: date) -> Duration:
    """Greedy calendar difference ``end - start``.

    Counts whole years, then whole months, then whole days from the earlier
    value, then the elapsed time that remains. Each step is measured from the
    earlier value in a single relativedelta, the same way ``date_add`` applies
    a duration, so ``date_add(start, between(start, end)) == end`` for
    forward differences. The sign follows ``end - start``.

    Raises:
        TypeError: For non-date inputs, or when mixing dates with datetimes
            or naive with aware datetimes
    """
    _check_value(start, "between() start")
    _check_value(end, "between() end")
    if isinstance(start, datetime) != isinstance(end, datetime):
        raise TypeError(
            "between() needs two dates or two datetimes, "
            f"got {type(start).__name__} and {type(end).__name__}"
        )
    if isinstance(start, datetime) and isinstance(end, datetime):
        if (start.tzinfo is None) != (end.tzinfo is None):
            raise TypeError(
                "between() cannot mix naive and timezone-aware datetimes.\n"
                "Hint: attach a zone to both: value.replace(tzinfo=ZoneInfo('UTC'))"
            )
        if start.tzinfo is not None:
            end = end.astimezone(start.tzinfo)

    negative = _instant(end) < _instant(start)
    lo, hi = (end, start) if negative else (start, end)
    hi_instant = _instant(hi)

    def fits(**calendar: int) -> bool:
        return _instant(_shift(lo, **calendar)) <= hi_instant

    years = hi.year - lo.year
    while years > 0 and not fits(years=years):
        years -= 1

    months = 0
    while months < 11 and fits(years=years, months=months + 1):
        months += 1

    anchor = _shift(lo, years=years, months=months)
    if isinstance(lo, datetime) and isinstance(anchor, datetime):
        days = (hi.date() - anchor.date()).days  # type: ignore[union-attr]
    else:
        days = (hi - anchor).days
    while days > 0 and not fits(years=years, months=months, days=days):
        days -= 1

    seconds = Decimal(0)
    hours = minutes = 0
    if isinstance(lo, datetime):
        rest = hi_instant - _instant(_shift(lo, years=years, months=months, days=days))
        whole_seconds = rest.days * SECONDS_PER_DAY + rest.seconds
        hours, whole_seconds = divmod(whole_seconds, SECONDS_PER_HOUR)
        minutes, whole_seconds = divmod(whole_seconds, SECONDS_PER_MINUTE)
        seconds = Decimal(whole_seconds) + Decimal(rest.microseconds) / _MICROSECONDS_PER_SECOND

    result = Duration(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )
    return result.negate() if negative else result


__all__ = ["between", "date_add", "date_subtract"]
