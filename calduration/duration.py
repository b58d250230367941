"""The Duration value type.

A Duration is an immutable, signed-magnitude set of per-unit fields. Calendar
fields (years, months, weeks) and exact fields (days through seconds, plus a
sub-second fraction) are kept apart: arithmetic never carries between years or
months and the exact units, because a month has no fixed length.
"""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, TypeAlias

from typing_extensions import override

from calduration.errors import RangeError
from calduration.formatting import LocaleFormatter, PlainFormatter
from calduration.iso import Term, parse_fields, serialize
from calduration.units import Unit, UnitName, resolve
from calduration.util import (
    DAY,
    DAYS_PER_WEEK,
    DEFAULT_POLICY,
    HOUR,
    HOURS_PER_DAY,
    MILLISECONDS_PER_SECOND,
    MINUTE,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECOND,
    SECONDS_PER_MINUTE,
    WEEK,
    ApproximationPolicy,
    decimal_context,
)

logger = logging.getLogger(__name__)

Number: TypeAlias = int | float | Decimal
DurationInput: TypeAlias = "Duration | DurationLike | str | Number | Mapping[str, Number]"

# Field names in storage order, largest first
_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

_UNIT_FIELD: dict[Unit, str] = {
    Unit.YEAR: "years",
    Unit.MONTH: "months",
    Unit.WEEK: "weeks",
    Unit.DAY: "days",
    Unit.HOUR: "hours",
    Unit.MINUTE: "minutes",
    Unit.SECOND: "seconds",
}

# Where the fractional part of a unit goes, and how many of that unit make one
_SPREAD: dict[Unit, tuple[Unit, int]] = {
    Unit.WEEK: (Unit.DAY, DAYS_PER_WEEK),
    Unit.DAY: (Unit.HOUR, HOURS_PER_DAY),
    Unit.HOUR: (Unit.MINUTE, MINUTES_PER_HOUR),
    Unit.MINUTE: (Unit.SECOND, SECONDS_PER_MINUTE),
}

# Borrow chain for the exact group: weeks <- days <- hours <- minutes <- seconds
_EXACT_CHAIN = ("weeks", "days", "hours", "minutes", "seconds")
_EXACT_RATIOS = (DAYS_PER_WEEK, HOURS_PER_DAY, MINUTES_PER_HOUR, SECONDS_PER_MINUTE)
_EXACT_MS = (WEEK, DAY, HOUR, MINUTE, SECOND)


def _to_decimal(value: Any, what: str = "magnitude") -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(
            f"Duration {what} must be a number, got {type(value).__name__!r}: {value!r}"
        )
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise RangeError(f"Duration {what} must be finite, got {value!r}")
        return Decimal(repr(value))
    if not value.is_finite():
        raise RangeError(f"Duration {what} must be finite, got {value!r}")
    return value


def _spread(unit: Unit, amount: Decimal) -> dict[str, Decimal]:
    """Split a signed amount of one unit into signed whole fields.

    Fractions move down to the next smaller unit until they reach the seconds
    field, which holds the sub-second part itself.
    """
    if unit is Unit.MILLISECOND:
        return {"seconds": amount / MILLISECONDS_PER_SECOND}
    if unit is Unit.SECOND:
        return {"seconds": amount}

    whole = Decimal(int(amount))
    remainder = amount - whole
    values = {_UNIT_FIELD[unit]: whole}
    if remainder:
        if unit not in _SPREAD:
            raise RangeError(
                f"Fractional {unit.plural} cannot be represented exactly, got {amount}.\n"
                f"Months and years have no fixed length; use whole numbers.\n"
                f"Example: Duration(1, 'month').add_days(15)"
            )
        smaller, ratio = _SPREAD[unit]
        for name, value in _spread(smaller, remainder * ratio).items():
            values[name] = values.get(name, Decimal(0)) + value
    return values


def _sign_of(value: Decimal) -> int:
    return (value > 0) - (value < 0)


def _borrow(values: list[Decimal], ratios: tuple[int, ...]) -> list[Decimal]:
    """Make a list of signed fields single-signed.

    ``ratios[i]`` is how many of ``values[i + 1]`` make one ``values[i]``.
    Larger fields against the group sign are first pushed down into the next
    smaller field; smaller fields against it then borrow from above. The
    result is the list of magnitudes; the group sign is the sign of the
    weighted total.
    """
    total = values[0]
    for value, ratio in zip(values[1:], ratios):
        total = total * ratio + value
    target = _sign_of(total)
    if target == 0:
        return [Decimal(0)] * len(values)

    values = list(values)
    for i in range(len(values) - 1):
        if values[i] * target < 0:
            values[i + 1] += values[i] * ratios[i]
            values[i] = Decimal(0)
    for i in range(len(values) - 1, 0, -1):
        if values[i] * target < 0:
            steps, rest = divmod(abs(values[i]), ratios[i - 1])
            if rest:
                steps += 1
            values[i] += target * steps * ratios[i - 1]
            values[i - 1] -= target * steps
    return [abs(value) for value in values]


class DurationLike(ABC):
    """Anything that holds a canonical Duration.

    Implementations can be passed wherever a Duration is accepted.
    """

    @property
    @abstractmethod
    def duration(self) -> "Duration":
        pass

    def to_iso_string(self) -> str:
        return serialize(self.duration)

    def value_of(self, policy: ApproximationPolicy | None = None) -> float:
        return self.duration.value_of(policy)


@dataclass(frozen=True)
class _TextInput:
    text: str


@dataclass(frozen=True)
class _NumberInput:
    magnitude: Decimal
    unit: Unit


@dataclass(frozen=True)
class _FieldsInput:
    fields: Mapping[Any, Any]


@dataclass(frozen=True)
class _CopyInput:
    source: "Duration"


_ConstructorInput: TypeAlias = _TextInput | _NumberInput | _FieldsInput | _CopyInput


def _classify(value: Any, unit: Any, fields: dict[str, Any]) -> _ConstructorInput:
    """Resolve constructor arguments to exactly one input form."""
    if fields:
        if value is not None or unit is not None:
            raise TypeError(
                "Duration() takes either a positional value or keyword fields, not both.\n"
                "Examples: Duration('P1D'), Duration(90, 'minutes'), Duration(days=1)"
            )
        return _FieldsInput(fields)
    if value is None:
        if unit is not None:
            raise TypeError(f"Duration() got a unit ({unit!r}) without a magnitude")
        return _FieldsInput({})
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return _NumberInput(
            _to_decimal(value), resolve(unit if unit is not None else Unit.MILLISECOND)
        )
    if unit is not None:
        raise TypeError(
            f"Duration() accepts a unit only with a number, got {type(value).__name__!r}"
        )
    if isinstance(value, DurationLike):
        return _CopyInput(value.duration)
    if isinstance(value, str):
        return _TextInput(value)
    if isinstance(value, Mapping):
        return _FieldsInput(value)
    raise TypeError(
        f"Cannot build a Duration from {type(value).__name__!r}: {value!r}\n"
        f"Examples: Duration('P1DT2H'), Duration(90, 'minutes'), "
        f"Duration({{'days': 1, 'hours': 2}})"
    )


def _accumulate(terms: list[Term], sign: int) -> dict[str, Decimal]:
    values = {name: Decimal(0) for name in _FIELDS}
    for unit, amount in terms:
        for name, value in _spread(unit, amount * sign).items():
            values[name] += value
    return values


def _field_terms(fields: Mapping[Any, Any]) -> list[Term]:
    terms: list[Term] = []
    seen: dict[Unit, Any] = {}
    for key, raw in fields.items():
        unit = resolve(key)
        if unit in seen:
            raise RangeError(
                f"Duration field {unit.value!r} given twice: {seen[unit]!r} and {key!r}"
            )
        seen[unit] = key
        amount = _to_decimal(raw, f"field {key!r}")
        if amount < 0:
            raise RangeError(
                f"Duration field {key!r} must be non-negative, got {raw!r}.\n"
                f"Hint: the sign applies to the whole duration:\n"
                f"  Duration({{{key!r}: {-amount}}}).negate()"
            )
        terms.append((unit, amount))
    return terms


def _signed_values(source: _ConstructorInput) -> dict[str, Decimal]:
    match source:
        case _TextInput(text=text):
            sign, terms = parse_fields(text)
            return _accumulate(terms, sign)
        case _NumberInput(magnitude=magnitude, unit=unit):
            return _accumulate([(unit, magnitude)], 1)
        case _FieldsInput(fields=fields):
            return _accumulate(_field_terms(fields), 1)
        case _CopyInput(source=duration):
            return duration._signed()


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Duration(DurationLike):
    """An immutable length of time.

    Build one from ISO text, a number and a unit, or a mapping of fields::

        Duration("P1DT2H")
        Duration(90, "minutes")
        Duration({"days": 1, "hours": 2})
        Duration(days=1, hours=2)

    A bare number is read as milliseconds. Every operation returns a new
    Duration. Use ``with_unit`` or the ``set_*`` methods to change a field;
    ``dataclasses.replace`` does not apply because the constructor takes unit
    fields, not the stored sign and fraction.

    Attributes:
        sign: +1 or -1; all fields are magnitudes
        years, months, weeks: Calendar fields
        days, hours, minutes, seconds: Exact fields
        fraction: Sub-second part of ``seconds``, 0 <= fraction < 1
    """

    sign: int
    years: int
    months: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    fraction: Decimal

    @decimal_context
    def __init__(
        self,
        value: "DurationInput | None" = None,
        unit: "UnitName | Unit | str | None" = None,
        /,
        **fields: Number,
    ) -> None:
        self._assign(self._resolve(_signed_values(_classify(value, unit, fields))))

    # -- construction helpers -------------------------------------------------

    def _assign(self, state: tuple[int, dict[str, Decimal]]) -> None:
        sign, magnitudes = state
        seconds = magnitudes["seconds"]
        whole_seconds = int(seconds)
        values: dict[str, Any] = {
            name: int(magnitudes[name]) for name in _FIELDS if name != "seconds"
        }
        values["seconds"] = whole_seconds
        values["fraction"] = seconds - whole_seconds
        if not any(values.values()):
            sign = 1
        object.__setattr__(self, "sign", sign)
        for name, value in values.items():
            object.__setattr__(self, name, value)

    @staticmethod
    def _resolve(values: dict[str, Decimal]) -> tuple[int, dict[str, Decimal]]:
        """Turn signed per-field values into (sign, magnitudes).

        Borrowing happens within the calendar group and within the exact
        group, never between them.
        """
        calendar = _borrow([values["years"], values["months"]], (MONTHS_PER_YEAR,))
        exact = _borrow([values[name] for name in _EXACT_CHAIN], _EXACT_RATIOS)

        calendar_sign = _sign_of(values["years"] * MONTHS_PER_YEAR + values["months"])
        exact_total = values["weeks"]
        for name, ratio in zip(_EXACT_CHAIN[1:], _EXACT_RATIOS):
            exact_total = exact_total * ratio + values[name]
        exact_sign = _sign_of(exact_total)

        if calendar_sign and exact_sign and calendar_sign != exact_sign:
            raise RangeError(
                f"Result mixes signs: calendar part is "
                f"{'positive' if calendar_sign > 0 else 'negative'}, exact part is "
                f"{'positive' if exact_sign > 0 else 'negative'}.\n"
                f"Years and months have no fixed length, so they cannot borrow "
                f"from days or smaller units.\n"
                f"Hint: apply both to a date instead: date_subtract(date_add(d, a), b)"
            )
        if any(_sign_of(v) not in (0, calendar_sign or exact_sign) for v in values.values()):
            logger.debug("Borrowed across fields to produce a single-signed duration")

        magnitudes = dict(zip(("years", "months"), calendar))
        magnitudes.update(zip(_EXACT_CHAIN, exact))
        return calendar_sign or exact_sign or 1, magnitudes

    @classmethod
    def _from_values(cls, values: dict[str, Decimal]) -> "Duration":
        duration = object.__new__(cls)
        duration._assign(cls._resolve(values))
        return duration

    def _signed(self) -> dict[str, Decimal]:
        values = {name: Decimal(getattr(self, name)) * self.sign for name in _FIELDS}
        values["seconds"] += self.fraction * self.sign
        return values

    def _magnitudes(self) -> dict[str, Decimal]:
        values = {name: Decimal(getattr(self, name)) for name in _FIELDS}
        values["seconds"] += self.fraction
        return values

    # -- class surface ----------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse ISO 8601 text ("P1DT2H") or unit terms ("1 day, 2 hours").

        Raises:
            ParseError: If neither form matches
        """
        sign, terms = parse_fields(text)
        return cls._from_values(_accumulate(terms, sign))

    @classmethod
    def zero(cls) -> "Duration":
        return cls()

    @classmethod
    def between(cls, start: date, end: date) -> "Duration":
        """Greedy calendar difference ``end - start``. See ``interop.between``."""
        from calduration.interop import between

        return between(start, end)

    @staticmethod
    @decimal_context
    def compare(
        a: "DurationInput",
        b: "DurationInput",
        relative_to: date | None = None,
    ) -> int:
        """Return -1, 0 or 1 as ``a`` is shorter than, as long as, or longer than ``b``.

        Without ``relative_to`` the comparison uses the approximate millisecond
        totals from ``value_of``, which are not calendar-exact when years or
        months are involved. With ``relative_to`` both durations are applied to
        that date and the resulting dates are compared.
        """
        left, right = _coerce(a), _coerce(b)
        if relative_to is None:
            diff = left._total_ms(DEFAULT_POLICY) - right._total_ms(DEFAULT_POLICY)
            return _sign_of(diff)

        from calduration.interop import date_add

        left_end, right_end = date_add(relative_to, left), date_add(relative_to, right)
        return (left_end > right_end) - (left_end < right_end)

    # -- DurationLike -----------------------------------------------------------

    @property
    @override
    def duration(self) -> "Duration":
        return self

    # -- arithmetic -------------------------------------------------------------

    @decimal_context
    def add(self, other: "DurationInput") -> "Duration":
        """Field-wise sum with borrowing; the result is single-signed.

        Fields are not carried: ``PT20H`` plus ``PT4H`` is ``PT24H``. Use
        ``normalize()`` to carry.

        Raises:
            RangeError: If the calendar and exact parts end up with opposite signs
        """
        mine, theirs = self._signed(), _coerce(other)._signed()
        return self._from_values({name: mine[name] + theirs[name] for name in _FIELDS})

    def subtract(self, other: "DurationInput") -> "Duration":
        return self.add(_coerce(other).negate())

    @decimal_context
    def negate(self) -> "Duration":
        return self._from_values({name: -v for name, v in self._signed().items()})

    @decimal_context
    def abs(self) -> "Duration":
        return self._from_values(self._magnitudes())

    @decimal_context
    def normalize(self, weeks: bool = False) -> "Duration":
        """Carry overflow upward by fixed ratios.

        Seconds, minutes and hours carry into days, and months into years.
        Days carry into weeks only when ``weeks`` is True. Nothing moves
        between months and days.
        """
        minutes, seconds = divmod(self.seconds, SECONDS_PER_MINUTE)
        hours, minutes = divmod(self.minutes + minutes, MINUTES_PER_HOUR)
        days, hours = divmod(self.hours + hours, HOURS_PER_DAY)
        days += self.days
        week_count = self.weeks
        if weeks:
            extra, days = divmod(days, DAYS_PER_WEEK)
            week_count += extra
        years, months = divmod(self.months, MONTHS_PER_YEAR)
        values = {
            "years": self.years + years,
            "months": months,
            "weeks": week_count,
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds + self.fraction,
        }
        return self._from_values(
            {name: Decimal(value) * self.sign for name, value in values.items()}
        )

    # -- per-unit operations ----------------------------------------------------

    @decimal_context
    def get(self, unit: "UnitName | Unit") -> int | float:
        """Return one field. Milliseconds are read from the sub-second fraction."""
        resolved = resolve(unit)
        if resolved is Unit.MILLISECOND:
            return float(self.fraction * MILLISECONDS_PER_SECOND)
        return getattr(self, _UNIT_FIELD[resolved])

    @decimal_context
    def with_unit(self, unit: "UnitName | Unit", value: Number) -> "Duration":
        """Return a copy with one field replaced; the sign is kept.

        Raises:
            RangeError: If the value is negative, non-finite or not whole
                (milliseconds must lie in [0, 1000))
        """
        resolved = resolve(unit)
        amount = _to_decimal(value, f"{resolved.value} value")
        magnitudes = self._magnitudes()
        if resolved is Unit.MILLISECOND:
            if not 0 <= amount < MILLISECONDS_PER_SECOND:
                raise RangeError(
                    f"Milliseconds must be in [0, {MILLISECONDS_PER_SECOND}), got {value!r}.\n"
                    f"Hint: use add_milliseconds() to carry into seconds"
                )
            magnitudes["seconds"] = self.seconds + amount / MILLISECONDS_PER_SECOND
        else:
            if amount < 0 or amount != amount.to_integral_value():
                raise RangeError(
                    f"{resolved.plural.capitalize()} must be a non-negative whole number, "
                    f"got {value!r}"
                )
            name = _UNIT_FIELD[resolved]
            magnitudes[name] = amount + (self.fraction if name == "seconds" else 0)
        sign = self.sign
        return self._from_values({name: v * sign for name, v in magnitudes.items()})

    def add_unit(self, unit: "UnitName | Unit", value: Number) -> "Duration":
        """Add a signed amount of one unit. Fractions spread into smaller units."""
        return self.add(Duration(value, resolve(unit)))

    def subtract_unit(self, unit: "UnitName | Unit", value: Number) -> "Duration":
        return self.add(Duration(value, resolve(unit)).negate())

    def get_years(self) -> int:
        return self.years

    def get_months(self) -> int:
        return self.months

    def get_weeks(self) -> int:
        return self.weeks

    def get_days(self) -> int:
        return self.days

    def get_hours(self) -> int:
        return self.hours

    def get_minutes(self) -> int:
        return self.minutes

    def get_seconds(self) -> int:
        return self.seconds

    @decimal_context
    def get_milliseconds(self) -> float:
        return float(self.fraction * MILLISECONDS_PER_SECOND)

    def set_years(self, value: Number) -> "Duration":
        return self.with_unit(Unit.YEAR, value)

    def set_months(self, value: Number) -> "Duration":
        return self.with_unit(Unit.MONTH, value)

    def set_weeks(self, value: Number) -> "Duration":
        return self.with_unit(Unit.WEEK, value)

    def set_days(self, value: Number) -> "Duration":
        return self.with_unit(Unit.DAY, value)

    def set_hours(self, value: Number) -> "Duration":
        return self.with_unit(Unit.HOUR, value)

    def set_minutes(self, value: Number) -> "Duration":
        return self.with_unit(Unit.MINUTE, value)

    def set_seconds(self, value: Number) -> "Duration":
        return self.with_unit(Unit.SECOND, value)

    def set_milliseconds(self, value: Number) -> "Duration":
        return self.with_unit(Unit.MILLISECOND, value)

    def add_years(self, value: Number) -> "Duration":
        return self.add_unit(Unit.YEAR, value)

    def add_months(self, value: Number) -> "Duration":
        return self.add_unit(Unit.MONTH, value)

    def add_weeks(self, value: Number) -> "Duration":
        return self.add_unit(Unit.WEEK, value)

    def add_days(self, value: Number) -> "Duration":
        return self.add_unit(Unit.DAY, value)

    def add_hours(self, value: Number) -> "Duration":
        return self.add_unit(Unit.HOUR, value)

    def add_minutes(self, value: Number) -> "Duration":
        return self.add_unit(Unit.MINUTE, value)

    def add_seconds(self, value: Number) -> "Duration":
        return self.add_unit(Unit.SECOND, value)

    def add_milliseconds(self, value: Number) -> "Duration":
        return self.add_unit(Unit.MILLISECOND, value)

    def subtract_years(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.YEAR, value)

    def subtract_months(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.MONTH, value)

    def subtract_weeks(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.WEEK, value)

    def subtract_days(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.DAY, value)

    def subtract_hours(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.HOUR, value)

    def subtract_minutes(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.MINUTE, value)

    def subtract_seconds(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.SECOND, value)

    def subtract_milliseconds(self, value: Number) -> "Duration":
        return self.subtract_unit(Unit.MILLISECOND, value)

    # -- comparison -------------------------------------------------------------

    def _key(self) -> tuple[int, int, int, Decimal]:
        """Canonical identity: sign, total months, whole exact seconds (weeks as
        days) and the sub-second fraction. Integer arithmetic only."""
        months = self.years * MONTHS_PER_YEAR + self.months
        seconds = self.weeks
        for name, ratio in zip(_EXACT_CHAIN[1:], _EXACT_RATIOS):
            seconds = seconds * ratio + getattr(self, name)
        return self.sign, months, seconds, self.fraction

    def equals(self, other: "Duration | DurationLike") -> bool:
        """True iff both normalize to the same fields.

        This is not derived from ``value_of``: one month and 30 days are
        never equal, whatever their approximate lengths.

        Raises:
            TypeError: If ``other`` is not a Duration
        """
        if not isinstance(other, DurationLike):
            raise TypeError(
                f"Can only compare a Duration with a Duration, "
                f"got {type(other).__name__!r}: {other!r}"
            )
        return self._key() == other.duration._key()

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DurationLike):
            return NotImplemented
        return self.equals(other)

    @override
    def __hash__(self) -> int:
        return hash(self._key())

    @decimal_context
    def _total_ms(self, policy: ApproximationPolicy) -> Decimal:
        magnitudes = self._magnitudes()
        total = magnitudes["years"] * policy.year_ms + magnitudes["months"] * policy.month_ms
        for name, length in zip(_EXACT_CHAIN, _EXACT_MS):
            total += magnitudes[name] * length
        return total * self.sign

    @override
    def value_of(self, policy: ApproximationPolicy | None = None) -> float:
        """Approximate length in milliseconds.

        Years use the average Gregorian year (365.2425 days) and a month is a
        twelfth of that, unless another ``policy`` is given. The result is
        exact only when years and months are zero.
        """
        return float(self._total_ms(policy or DEFAULT_POLICY))

    @decimal_context
    def as_unit(
        self, unit: "UnitName | Unit", policy: ApproximationPolicy | None = None
    ) -> float:
        """Approximate length expressed in ``unit``. Lossy; see ``value_of``."""
        policy = policy or DEFAULT_POLICY
        resolved = resolve(unit)
        if resolved is Unit.YEAR:
            length = policy.year_ms
        elif resolved is Unit.MONTH:
            length = policy.month_ms
        else:
            length = Decimal(resolved.fixed_ms or 1)
        return float(self._total_ms(policy) / length)

    def as_years(self) -> float:
        return self.as_unit(Unit.YEAR)

    def as_months(self) -> float:
        return self.as_unit(Unit.MONTH)

    def as_weeks(self) -> float:
        return self.as_unit(Unit.WEEK)

    def as_days(self) -> float:
        return self.as_unit(Unit.DAY)

    def as_hours(self) -> float:
        return self.as_unit(Unit.HOUR)

    def as_minutes(self) -> float:
        return self.as_unit(Unit.MINUTE)

    def as_seconds(self) -> float:
        return self.as_unit(Unit.SECOND)

    def as_milliseconds(self) -> float:
        return self.as_unit(Unit.MILLISECOND)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DurationLike):
            return NotImplemented
        return Duration.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DurationLike):
            return NotImplemented
        return Duration.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DurationLike):
            return NotImplemented
        return Duration.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DurationLike):
            return NotImplemented
        return Duration.compare(self, other) >= 0

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, DurationLike):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, DurationLike):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Duration":
        return self.negate()

    def __abs__(self) -> "Duration":
        return self.abs()

    def __bool__(self) -> bool:
        return self._key() != (1, 0, 0, 0)

    def __float__(self) -> float:
        return self.value_of()

    def __int__(self) -> int:
        return int(self._total_ms(DEFAULT_POLICY))

    # -- text -------------------------------------------------------------------

    @override
    def to_iso_string(self) -> str:
        return serialize(self)

    def to_string(self) -> str:
        return serialize(self)

    def to_locale_string(
        self, locale: str | None = None, formatter: LocaleFormatter | None = None
    ) -> str:
        """Render for humans through a pluggable formatter (English by default)."""
        return (formatter or PlainFormatter()).format(self, locale)

    @override
    def __str__(self) -> str:
        return serialize(self)

    @override
    def __repr__(self) -> str:
        return f"Duration({serialize(self)!r})"


def _coerce(value: "DurationInput") -> Duration:
    if isinstance(value, Duration):
        return value
    return Duration(value)


__all__ = ["Duration", "DurationInput", "DurationLike"]
