"""Tests for the pluggable locale formatter."""

from calduration import CompactFormatter, Duration, LocaleFormatter, PlainFormatter


def test_plain_formatter_is_default():
    assert Duration("P1DT2H").to_locale_string() == "1 day, 2 hours"
    assert Duration("-PT1M").to_locale_string() == "-1 minute"
    assert Duration().to_locale_string() == "0 seconds"
    assert Duration("PT1.5S").to_locale_string() == "1.5 seconds"
    assert Duration("P2W").to_locale_string("en-GB") == "2 weeks"


def test_plain_formatter_separator():
    formatter = PlainFormatter(separator=" and ")

    assert Duration("PT1H30M").to_locale_string(formatter=formatter) == "1 hour and 30 minutes"


def test_compact_formatter():
    d = Duration("P1Y2M3DT4H5M")

    assert d.to_locale_string(formatter=CompactFormatter()) == "1y 2mo 3d 4h 5m"
    assert Duration().to_locale_string(formatter=CompactFormatter()) == "0s"
    assert Duration("-PT90S").to_locale_string(formatter=CompactFormatter()) == "-90s"


def test_formatted_text_parses_back():
    for text in ("P1Y2M3DT4H5M6.5S", "-P3W", "PT0S", "P1DT1S"):
        d = Duration(text)
        assert Duration.parse(d.to_locale_string()).equals(d)
        assert Duration.parse(d.to_locale_string(formatter=CompactFormatter())).equals(d)


class _LocaleEcho(LocaleFormatter):
    def format(self, duration, locale=None):
        return f"{locale}:{duration.to_iso_string()}"


def test_custom_formatter_receives_locale():
    assert Duration("PT5M").to_locale_string("fr", formatter=_LocaleEcho()) == "fr:PT5M"
