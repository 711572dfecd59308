"""Unit tests for date display helpers."""

from datetime import date

import pytest

from vitae.contexts.content import format_date, format_date_range, format_location
from vitae.contexts.content.dates import parse_date


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-03-15", "Mar 2021"),
        ("2021-03-15T00:00:00.000Z", "Mar 2021"),
        ("2021-03", "Mar 2021"),
        ("Sep 2019", "Sep 2019"),
        ("September 2019", "Sep 2019"),
        ("11/2020", "Nov 2020"),
        (date(2018, 1, 31), "Jan 2018"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", "   ", None, "not a date", "2021-13-01"])
def test_blank_or_malformed_date_is_empty(value):
    assert format_date(value) == ""


@pytest.mark.unit
def test_parse_date_returns_date():
    assert parse_date("2020-02-29") == date(2020, 2, 29)
    assert parse_date("garbage") is None


@pytest.mark.unit
def test_range_with_both_ends():
    assert format_date_range("2017-06-01", "2021-02-01") == "Jun 2017 - Feb 2021"


@pytest.mark.unit
def test_current_always_renders_present():
    assert format_date_range("2021-03-01", "", current=True) == "Mar 2021 - Present"
    assert format_date_range("2021-03-01", "2022-01-01", current=True) == "Mar 2021 - Present"
    assert format_date_range("", "", current=True) == " - Present"


@pytest.mark.unit
def test_range_with_missing_end():
    assert format_date_range("2021-03-01", "") == "Mar 2021 - "


@pytest.mark.unit
def test_range_with_no_dates_is_empty():
    assert format_date_range("", "") == ""
    assert format_date_range("bad", None) == ""


@pytest.mark.unit
def test_format_location():
    assert format_location("Boston", "MA") == "Boston, MA"
    assert format_location("Boston", "") == "Boston"
    assert format_location("", "MA") == "MA"
    assert format_location("", "") == ""
