"""Tests for ISO 8601 parsing, the unit-term fallback and serialization."""

from decimal import Decimal, localcontext

import pytest

from calduration import Duration, ParseError, parse, serialize


def test_parse_date_and_time_designators():
    """All designators parse in order; the fraction belongs to seconds."""
    d = parse("P1Y2M3DT4H5M6.5S")

    assert (d.years, d.months, d.days) == (1, 2, 3)
    assert (d.hours, d.minutes, d.seconds) == (4, 5, 6)
    assert d.fraction == Decimal("0.5")
    assert d.sign == 1
    assert d.to_iso_string() == "P1Y2M3DT4H5M6.5S"


def test_parse_time_without_t_designator():
    """An H designator in the date part starts the time part implicitly."""
    d = parse("P1D2H")

    assert d.days == 1
    assert d.hours == 2
    assert d.to_iso_string() == "P1DT2H"


def test_parse_comma_fraction_separator():
    d = parse("PT1,25S")

    assert d.seconds == 1
    assert d.fraction == Decimal("0.25")
    assert serialize(d) == "PT1.25S"


def test_parse_weeks():
    d = parse("P2W")

    assert d.weeks == 2
    assert serialize(d) == "P2W"


def test_parse_negative_and_lowercase():
    """A leading '-' negates the whole duration; designators ignore case."""
    d = parse("-pt30m")

    assert d.sign == -1
    assert d.minutes == 30
    assert serialize(d) == "-PT30M"


def test_zero_forms():
    """Every zero duration serializes to PT0S with a positive sign."""
    assert serialize(Duration()) == "PT0S"
    assert parse("PT0S").equals(Duration.zero())

    negative_zero = parse("-P0D")
    assert negative_zero.sign == 1
    assert serialize(negative_zero) == "PT0S"


@pytest.mark.parametrize(
    "text",
    [
        "P1Y1W",  # week combined with year
        "P1W1D",  # week combined with day
        "P",  # no designator
        "PT",  # empty time part
        "P1DT",  # empty time part after date
        "P1M1Y",  # out of order
        "P1D1D",  # repeated
        "PT1.5H",  # fraction outside seconds
        "P1",  # number without designator
        "P1X",  # unknown designator
        "PT1H1D",  # date designator in time part
        "P1DTT1H",  # repeated T
    ],
)
def test_invalid_iso_text(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_error_reports_fragment_and_offset():
    """ParseError points at the offending part of the input."""
    with pytest.raises(ParseError, match="week designator cannot be combined") as info:
        parse("P1Y1W")
    assert info.value.offset == 3
    assert info.value.fragment == "1W"
    assert info.value.text == "P1Y1W"

    with pytest.raises(ParseError, match="out of order") as info:
        parse("P1M1Y")
    assert info.value.offset == 4
    assert info.value.fragment == "Y"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("P1Y1W")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2 days", "P2D"),
        ("1 hour, 30 minutes", "PT1H30M"),
        ("1h 30m", "PT1H30M"),
        ("2 weeks and 3 days", "P17D"),
        ("-90 seconds", "-PT90S"),
        ("1.5 hours", "PT1H30M"),
        ("1 year 2 months", "P1Y2M"),
        ("250 ms", "PT0.25S"),
    ],
)
def test_parse_unit_terms_fallback(text, expected):
    """Non-ISO text is read as '<number> <unit>' terms."""
    assert serialize(parse(text)) == expected


def test_fallback_keeps_weeks_field():
    d = parse("2 weeks and 3 days")

    assert d.weeks == 2
    assert d.days == 3


def test_fallback_unknown_unit_reports_fragment():
    with pytest.raises(ParseError, match="unknown unit 'fortnights'") as info:
        parse("2 fortnights")
    assert info.value.offset == 2
    assert info.value.fragment == "fortnights"


@pytest.mark.parametrize("text", ["soon", "", "1 day,", "3", "-"])
def test_invalid_unit_terms(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_rejects_non_string():
    with pytest.raises(TypeError, match="must be str"):
        Duration.parse(42)  # type: ignore[arg-type]


def test_serialize_folds_weeks_when_mixed():
    """PnW stands alone, so weeks mixed with other fields are written as days."""
    d = Duration(weeks=1, days=2)

    assert serialize(d) == "P9D"
    assert parse(serialize(d)).equals(d)


def test_serialize_sub_second_values():
    assert serialize(Duration(500)) == "PT0.5S"
    assert serialize(Duration(1)) == "PT0.001S"
    assert serialize(Duration(60000)) == "PT60S"


def test_round_trip_ignores_caller_decimal_context():
    with localcontext(prec=4):
        d = parse("PT1.1234567S")

        assert d.fraction == Decimal("0.1234567")
        assert serialize(d) == "PT1.1234567S"
        assert d.to_locale_string() == "1.1234567 seconds"


@pytest.mark.parametrize(
    "text",
    [
        "P1Y2M3DT4H5M6.5S",
        "P3W",
        "-P1DT12H",
        "PT0.125S",
        "P10Y",
        "PT36H",
        "PT0S",
    ],
)
def test_round_trip(text):
    """parse(serialize(d)) equals d."""
    d = parse(text)

    assert parse(serialize(d)).equals(d)
    assert serialize(d) == text
