"""Tests for equality, approximate totals and ordering."""

from datetime import date
from decimal import Decimal, localcontext

import pytest

from calduration import ApproximationPolicy, Duration


def test_equal_field_sets():
    assert Duration({"days": 1, "hours": 2}).equals(Duration("P1D2H"))


@pytest.mark.parametrize(
    "left, right",
    [
        ("PT24H", "P1D"),
        ("P1W", "P7D"),
        ("P12M", "P1Y"),
        ("PT90M", "PT1H30M"),
        ("PT1.5S", "PT1.500S"),
    ],
)
def test_equal_after_normalization(left, right):
    """Equality compares normalized fields, not the text they came from."""
    assert Duration(left).equals(Duration(right))
    assert hash(Duration(left)) == hash(Duration(right))


def test_month_is_not_thirty_days():
    """Equality is not derived from the approximate total."""
    month, days = Duration({"months": 1}), Duration({"days": 30})

    assert not month.equals(days)
    assert month != days
    assert abs(month.value_of() - days.value_of()) < 86400000


def test_sign_matters_for_equality():
    assert not Duration("-PT1H").equals(Duration("PT1H"))


def test_tiny_fraction_is_not_lost_in_equality():
    tiny = Duration("PT0.0000000000000000000000001S")
    d = Duration("P1D").add(tiny)

    assert d.fraction == Decimal("1E-25")
    assert not d.equals(Duration("P1D"))
    assert len({d, Duration("P1D")}) == 2


def test_equality_ignores_caller_decimal_context():
    with localcontext(prec=3):
        assert not Duration("PT1.0001S").equals(Duration("PT1S"))
        assert not Duration({"days": 1, "seconds": 0.5}).equals(Duration("P1D"))


def test_equals_rejects_other_types():
    with pytest.raises(TypeError, match="Can only compare a Duration"):
        Duration("P1D").equals("P1D")  # type: ignore[arg-type]

    assert Duration("P1D") != "P1D"


def test_usable_as_set_members():
    assert len({Duration("PT24H"), Duration("P1D"), Duration("PT1H")}) == 2


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PT1M", 60000),
        ("PT0.5S", 500),
        ("-PT1S", -1000),
        ("P1W", 604800000),
        ("P1D", 86400000),
        ("P1Y", 31556952000),
        ("P1M", 2629746000),
    ],
)
def test_value_of(text, expected):
    """Calendar units use the average Gregorian year and a twelfth of it."""
    assert Duration(text).value_of() == expected


def test_number_conversions():
    d = Duration("PT1.5S")

    assert float(d) == 1500.0
    assert int(d) == 1500


def test_as_units():
    assert Duration("PT90M").as_hours() == 1.5
    assert Duration("P1Y").as_months() == 12.0
    assert Duration("P1Y").as_days() == 365.2425
    assert Duration("P1D").as_weeks() == pytest.approx(1 / 7)
    assert Duration("PT2M").as_seconds() == 120.0
    assert Duration("PT2S").as_milliseconds() == 2000.0
    assert Duration("P2W").as_minutes() == 20160.0
    assert Duration("P6M").as_years() == 0.5


def test_custom_approximation_policy():
    policy = ApproximationPolicy(days_per_year=Decimal(365))

    assert Duration("P1Y").value_of(policy) == 365 * 86400000
    assert Duration("P1M").as_unit("days", policy) == pytest.approx(365 / 12)


def test_policy_rejects_non_positive_ratios():
    with pytest.raises(ValueError, match="must be positive"):
        ApproximationPolicy(days_per_year=Decimal(0))


def test_ordering_of_exact_durations():
    """Without calendar fields the ordering is exact."""
    durations = [Duration(text) for text in ("PT61M", "PT1H", "-PT1H", "P1D", "PT0S")]

    ordered = sorted(durations)

    assert [d.to_iso_string() for d in ordered] == ["-PT1H", "PT0S", "PT1H", "PT61M", "P1D"]
    assert Duration("PT1H") < Duration("PT61M")
    assert Duration("PT60M") <= Duration("PT1H")
    assert Duration("PT1H") >= Duration("PT60M")
    assert Duration("P1D") > Duration("PT23H59M59.999S")


def test_ordering_rejects_other_types():
    with pytest.raises(TypeError):
        Duration("P1D") < 5  # type: ignore[operator]


def test_compare_is_approximate_without_relative_date():
    """An average month is a bit longer than 30 days."""
    assert Duration.compare("P1M", "P30D") == 1
    assert Duration.compare("PT1H", "PT60M") == 0
    assert Duration.compare("PT1S", "PT2S") == -1


def test_compare_relative_to_a_date():
    """February is shorter than 30 days."""
    assert Duration.compare("P1M", "P30D", relative_to=date(2019, 2, 1)) == -1
    assert Duration.compare("P1M", "P30D", relative_to=date(2019, 4, 1)) == 0
    assert Duration.compare("P1M", "P30D", relative_to=date(2019, 1, 1)) == 1
