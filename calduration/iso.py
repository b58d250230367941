"""ISO 8601 duration parsing and serialization.

The accepted grammar is ``[sign] "P" [nY] [nM] [nW] [nD] ["T" [nH] [nM] [nS]]``.
Only the seconds value may carry a fraction (``.`` or ``,``). The week form
``PnW`` stands alone. A leading ``-`` marks a negative duration; this is an
extension, ISO 8601 itself has no signed durations.

Text that is not ISO is retried as a plain list of ``<number> <unit>`` terms
("2 days", "1 hour, 30 minutes", "1h 30m").
"""

import logging
import re
from decimal import Decimal
from typing import TYPE_CHECKING, TypeAlias

from calduration.errors import ParseError, UnknownUnitError
from calduration.units import Unit, resolve
from calduration.util import DAYS_PER_WEEK, decimal_context

if TYPE_CHECKING:
    from calduration.duration import Duration

logger = logging.getLogger(__name__)

Term: TypeAlias = tuple[Unit, Decimal]

_DATE_ORDER = "YMWD"
_TIME_ORDER = "HMS"
_DATE_UNITS = (Unit.YEAR, Unit.MONTH, Unit.WEEK, Unit.DAY)
_TIME_UNITS = (Unit.HOUR, Unit.MINUTE, Unit.SECOND)

_ISO_NUMBER = re.compile(r"\d+(?:[.,]\d+)?")
_TERM = re.compile(r"\s*(?P<number>\d+(?:\.\d+)?)\s*(?P<unit>[A-Za-z]+)\s*")
_SEPARATOR = re.compile(r"(?:,\s*(?:and\b\s*)?|and\b\s*)", re.IGNORECASE)


def _fail(text: str, start: int, reason: str, stop: int | None = None) -> ParseError:
    stop = start + 1 if stop is None else stop
    return ParseError(text, text[start:stop], start, reason)


def _split_sign(text: str) -> tuple[int, int]:
    """Return (sign, offset of the first character after the sign)."""
    if text[:1] == "-":
        return -1, 1
    if text[:1] == "+":
        return 1, 1
    return 1, 0


def parse_iso(text: str) -> tuple[int, list[Term]]:
    """Parse strict ISO 8601 duration text into a sign and unit terms.

    An ``H`` or ``S`` designator met before any ``T`` starts the time part
    implicitly, so ``P1D2H`` reads as ``P1DT2H``.

    Raises:
        ParseError: With the offending fragment and its offset
    """
    if not text.isascii():
        bad = next(i for i, char in enumerate(text) if not char.isascii())
        raise _fail(text, bad, "non-ASCII character")

    upper = text.upper()
    sign, pos = _split_sign(upper)
    if upper[pos : pos + 1] != "P":
        raise _fail(text, pos, "expected the 'P' designator")
    pos += 1

    order, units = _DATE_ORDER, _DATE_UNITS
    in_time = False
    time_marker: int | None = None
    last = -1
    terms: list[Term] = []
    offsets: list[int] = []

    while pos < len(upper):
        if upper[pos] == "T":
            if in_time:
                raise _fail(text, pos, "repeated 'T' designator")
            order, units, in_time, last = _TIME_ORDER, _TIME_UNITS, True, -1
            time_marker = pos
            pos += 1
            continue

        match = _ISO_NUMBER.match(upper, pos)
        if match is None:
            raise _fail(text, pos, "expected a number")
        number, end = match.group(), match.end()
        if end >= len(upper):
            raise _fail(text, pos, "missing designator after number", stop=end)

        designator = upper[end]
        if not in_time and designator in "HS":
            order, units, in_time, last = _TIME_ORDER, _TIME_UNITS, True, -1

        index = order.find(designator)
        if index < 0:
            raise _fail(text, end, f"unexpected designator {text[end]!r}")
        if index <= last:
            raise _fail(text, end, f"designator {text[end]!r} is repeated or out of order")
        last = index

        unit = units[index]
        if unit is not Unit.SECOND and not number.isdigit():
            raise _fail(
                text, pos, "only the seconds value may have a fraction", stop=end + 1
            )
        terms.append((unit, Decimal(number.replace(",", "."))))
        offsets.append(pos)
        pos = end + 1

    if not terms:
        raise _fail(text, pos, "at least one designator is required", stop=pos)
    if time_marker is not None and not any(u in _TIME_UNITS for u, _ in terms):
        raise _fail(text, time_marker, "'T' must be followed by a time designator")

    for (unit, _), offset in zip(terms, offsets):
        if unit is Unit.WEEK and len(terms) > 1:
            raise _fail(
                text,
                offset,
                "the week designator cannot be combined with other designators",
                stop=upper.index("W", offset) + 1,
            )

    return sign, terms


def parse_terms(text: str) -> tuple[int, list[Term]]:
    """Parse a list of ``<number> <unit>`` terms such as "1 hour, 30 minutes".

    Terms may be separated by whitespace, commas or "and". Units are resolved
    through the unit registry.

    Raises:
        ParseError: With the offending fragment and its offset
    """
    sign, pos = _split_sign(text.lstrip())
    pos += len(text) - len(text.lstrip())
    terms: list[Term] = []

    while pos < len(text):
        match = _TERM.match(text, pos)
        if match is None:
            rest = text[pos:].strip()
            start = text.index(rest, pos) if rest else pos
            raise _fail(text, start, "expected '<number> <unit>'", stop=len(text))
        try:
            unit = resolve(match.group("unit"))
        except UnknownUnitError as exc:
            raise _fail(
                text,
                match.start("unit"),
                f"unknown unit {match.group('unit')!r}",
                stop=match.end("unit"),
            ) from exc
        terms.append((unit, Decimal(match.group("number"))))
        pos = match.end()

        separator = _SEPARATOR.match(text, pos)
        if separator is not None:
            pos = separator.end()
            if pos >= len(text):
                raise _fail(text, separator.start(), "dangling separator", stop=pos)

    if not terms:
        raise _fail(text, 0, "empty duration text", stop=len(text))
    return sign, terms


def parse_fields(text: str) -> tuple[int, list[Term]]:
    """Parse ISO text, falling back to "<number> <unit>" terms.

    When both readings fail, the ISO error is raised for text that starts
    with ``P`` (after an optional sign), the fallback error otherwise.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"Duration text must be str, got {type(text).__name__!r}: {text!r}"
        )
    try:
        return parse_iso(text)
    except ParseError as iso_error:
        try:
            sign, terms = parse_terms(text)
        except ParseError as fallback_error:
            _, start = _split_sign(text.strip())
            if text.strip()[start : start + 1] in ("P", "p"):
                raise iso_error from None
            raise fallback_error from None
        logger.debug("Parsed %r as unit terms after ISO failure: %s", text, iso_error.reason)
        return sign, terms


def parse(text: str) -> "Duration":
    """Parse text into a Duration. See ``parse_fields`` for the accepted forms."""
    # Import at runtime to avoid circular dependency
    from calduration.duration import Duration

    return Duration.parse(text)


def _format_seconds(seconds: int, fraction: Decimal) -> str:
    if not fraction:
        return str(seconds)
    digits = format(fraction.normalize(), "f")
    return f"{seconds}{digits[digits.index('.'):]}"


@decimal_context
def serialize(duration: "Duration") -> str:
    """Render a Duration as ISO 8601 text.

    Fields are emitted in fixed order with zero fields omitted. The zero
    duration is ``PT0S``. Weeks are written as ``PnW`` only when no other
    field is set; otherwise they are folded into days.
    """
    prefix = "-P" if duration.sign < 0 else "P"
    others = (
        duration.years,
        duration.months,
        duration.days,
        duration.hours,
        duration.minutes,
        duration.seconds,
        duration.fraction,
    )
    if duration.weeks and not any(others):
        return f"{prefix}{duration.weeks}W"

    days = duration.days + duration.weeks * DAYS_PER_WEEK
    date_part = "".join(
        f"{value}{designator}"
        for value, designator in (
            (duration.years, "Y"),
            (duration.months, "M"),
            (days, "D"),
        )
        if value
    )
    time_part = "".join(
        f"{value}{designator}"
        for value, designator in (
            (duration.hours, "H"),
            (duration.minutes, "M"),
        )
        if value
    )
    if duration.seconds or duration.fraction:
        time_part += f"{_format_seconds(duration.seconds, duration.fraction)}S"

    if not date_part and not time_part:
        return "PT0S"
    return f"{prefix}{date_part}{'T' + time_part if time_part else ''}"


__all__ = ["parse", "parse_fields", "parse_iso", "parse_terms", "serialize"]
