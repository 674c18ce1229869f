"""Tests of parse_date."""

import pytest
import pandas as pd

import gradecalc

# parse_date ---------------------------------------------------------------------------


def test_parse_date_with_explicit_year_and_due_separator():
    # when
    date = gradecalc.parse_date("Mar 5, 2023 at 11:59pm")

    # then
    assert date == pd.Timestamp(2023, 3, 5, 23, 59)


def test_parse_date_with_submission_separator_and_given_year():
    # when
    date = gradecalc.parse_date("Mar 5 by 9:00am", year=2023)

    # then
    assert date == pd.Timestamp(2023, 3, 5, 9, 0)


def test_parse_date_defaults_to_current_year():
    # when
    date = gradecalc.parse_date("Mar 5 by 9:00am")

    # then
    assert date == pd.Timestamp(pd.Timestamp.now().year, 3, 5, 9, 0)


def test_parse_date_explicit_year_overrides_given_year():
    # when
    date = gradecalc.parse_date("Dec 31, 2022 at 11pm", year=2023)

    # then
    assert date == pd.Timestamp(2022, 12, 31, 23, 0)


def test_parse_date_minute_defaults_to_zero():
    # when
    date = gradecalc.parse_date("Oct 9 at 4pm", year=2024)

    # then
    assert date == pd.Timestamp(2024, 10, 9, 16, 0)


def test_parse_date_noon_stays_twelve():
    # when
    date = gradecalc.parse_date("Oct 9 at 12:30pm", year=2024)

    # then
    assert date.hour == 12
    assert date.minute == 30


def test_parse_date_twelve_am_is_left_as_hour_twelve():
    # when
    date = gradecalc.parse_date("Oct 9 at 12am", year=2024)

    # then
    assert date.hour == 12


def test_parse_date_ignores_surrounding_whitespace():
    # when
    date = gradecalc.parse_date("  Jan 2 at 8:05am \n", year=2024)

    # then
    assert date == pd.Timestamp(2024, 1, 2, 8, 5)


def test_parse_date_of_empty_string_is_none():
    assert gradecalc.parse_date("") is None
    assert gradecalc.parse_date("   ") is None


@pytest.mark.parametrize(
    "text",
    [
        "Mar 5 at 11:59",  # no am/pm
        "Mar 5",  # no time
        "Foo 5 at 9am",  # unknown month
        "Mar five at 9am",
        "Mar 5 at x:30pm",
        "Mar 5, twenty at 9am",
    ],
)
def test_parse_date_raises_on_malformed_text(text):
    with pytest.raises(ValueError):
        gradecalc.parse_date(text, year=2024)
