"""Export normalized assignments as JSON or CSV."""

import pathlib as _pathlib
import typing
from typing import Optional, Union

import pandas as _pd

from .. import _util
from ..core import AssignmentRecord, Comment

#: the columns of the exported table, in order
COLUMNS = [
    "title",
    "group",
    "earned",
    "available",
    "counts_toward_final_grade",
    "due",
    "submitted",
    "comments",
]


def _epoch_ms(date: Optional[_pd.Timestamp]) -> Optional[int]:
    """Milliseconds since the epoch, or `None`."""
    if date is None:
        return None
    return date.value // 1_000_000


def _comment_dict(comment: Comment) -> dict:
    return {
        "text": comment.text,
        "name": comment.name,
        "date": _epoch_ms(comment.date),
    }


def to_frame(assignments: typing.Sequence[AssignmentRecord]) -> _pd.DataFrame:
    """Create a table with one row per assignment.

    The ``due`` and ``submitted`` columns hold datetimes, with ``NaT`` where the
    date is unknown. The ``comments`` column holds a list of dictionaries per
    assignment, with comment dates in milliseconds since the epoch.

    """
    table = _pd.DataFrame(
        [
            {
                "title": a.title,
                "group": a.group,
                "earned": a.earned,
                "available": a.available,
                "counts_toward_final_grade": a.counts_toward_final_grade,
                "due": a.due,
                "submitted": a.submitted,
                "comments": [_comment_dict(c) for c in a.comments],
            }
            for a in assignments
        ],
        columns=COLUMNS,
    )
    table["due"] = _pd.to_datetime(table["due"])
    table["submitted"] = _pd.to_datetime(table["submitted"])
    return table


def write_json(
    assignments: typing.Sequence[AssignmentRecord],
    path: Optional[Union[str, _pathlib.Path]] = None,
) -> Optional[str]:
    """Export assignments, including their comments, to JSON.

    The result is a list with one object per assignment. Dates are written as
    milliseconds since the epoch. The dates carry no timezone, so their wall
    clock time is written as if it were UTC; a browser reading the same dates
    would use its local time instead.

    Parameters
    ----------
    assignments : Sequence[AssignmentRecord]
        The assignments to export.
    path : Optional[str or pathlib.Path]
        Where the JSON will be written. If `None`, it is returned as a string.

    """
    return to_frame(assignments).to_json(
        path, orient="records", date_format="epoch", date_unit="ms"
    )


def write_csv(
    assignments: typing.Sequence[AssignmentRecord],
    path: Optional[Union[str, _pathlib.Path]] = None,
) -> Optional[str]:
    """Export assignments to CSV.

    Comments cannot be represented in a flat table, so they are left out. Fields
    containing quotes or commas are quoted, with embedded quotes doubled.

    Parameters
    ----------
    assignments : Sequence[AssignmentRecord]
        The assignments to export.
    path : Optional[str or pathlib.Path]
        Where the CSV will be written. If `None`, it is returned as a string.

    """
    table = to_frame(assignments).drop(columns="comments")
    return table.to_csv(path, index=False)


def export_filename(course: str, extension: str = "json") -> str:
    """The name of the file that a course's assignments are exported to.

    Example
    -------
    >>> export_filename("MATH 20A: Calculus (Fall 2023)", "csv")
    'math-20a-calculus-fall-2023-assignments.csv'

    """
    return f"{_util.to_kebab_case(course)}-assignments.{extension}"
