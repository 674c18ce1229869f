"""Parse the dates that appear on a Canvas grades page."""

import re as _re
import typing

import pandas as pd

MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def _to_int(s: str, what: str, text: str) -> int:
    try:
        return int(s.strip())
    except ValueError:
        raise ValueError(f"Invalid {what} {s!r} in date {text!r}.") from None


def parse_date(
    text: str, *, year: typing.Optional[int] = None
) -> typing.Optional[pd.Timestamp]:
    """Parse a date as written on a Canvas grades page.

    Canvas writes due dates like ``"Mar 5 at 11:59pm"`` and submission dates
    like ``"Mar 5 by 9:00am"``. The year is only given when it differs from the
    current one, as in ``"Mar 5, 2023 at 11:59pm"``.

    Parameters
    ----------
    text : str
        The date text. Surrounding whitespace is ignored.
    year : Optional[int]
        The year to assume when the text doesn't give one. If `None`, the
        current calendar year is used. Note that this misattributes dates from
        last year that Canvas writes without a year.

    Returns
    -------
    Optional[pd.Timestamp]
        The date and time, or `None` if the text is empty.

    Raises
    ------
    ValueError
        If the text is not empty but cannot be parsed.

    Example
    -------
    >>> parse_date("Mar 5, 2023 at 11:59pm")
    Timestamp('2023-03-05 23:59:00')

    """
    text = text.strip()
    if text == "":
        return None

    separator = " by " if "by" in text else " at "
    parts = text.split(separator)
    if len(parts) != 2:
        raise ValueError(f"Date {text!r} has no time of day.")
    date, time = parts

    if year is None:
        year = pd.Timestamp.now().year

    if "," in date:
        date, year_text = date.split(",", 1)
        year = _to_int(year_text, "year", text)

    try:
        month_name, day_text = date.split()
    except ValueError:
        raise ValueError(f"Date {text!r} is not of the form 'Mon D'.") from None

    if month_name not in MONTHS:
        raise ValueError(f"Unknown month {month_name!r} in date {text!r}.")

    match = _re.search(r"am|pm", time)
    if match is None:
        raise ValueError(f"Time in date {text!r} has no am/pm marker.")
    period = match.group(0)

    hour_text = time.replace(period, "")
    minute = 0
    if ":" in hour_text:
        hour_text, minute_text = hour_text.split(":", 1)
        minute = _to_int(minute_text, "minute", text)
    hour = _to_int(hour_text, "hour", text)

    # 12am stays at hour 12
    if period == "pm" and hour != 12:
        hour += 12

    return pd.Timestamp(
        year=year,
        month=MONTHS.index(month_name) + 1,
        day=_to_int(day_text, "day", text),
        hour=hour,
        minute=minute,
    )
