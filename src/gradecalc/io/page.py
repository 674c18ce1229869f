"""Read grades pages scraped from Canvas."""

import dataclasses
import json as _json
import pathlib as _pathlib
import typing
from typing import Union

from ..core import (
    AssignmentKind,
    CalculatorOptions,
    GradeSummary,
    RawAssignment,
    RawComment,
    build_weight_table,
    calculate,
    normalize_assignments,
)


@dataclasses.dataclass
class GradePage:
    """The contents of a single course's grades page.

    Attributes
    ----------
    course : str
        The name of the course.
    assignments : list[RawAssignment]
        The assignment rows, in page order.
    weight_rows : list[tuple[str, str]]
        The rows of the group weights table, as (group, percentage text) pairs.
        Empty if the course is unweighted.
    year : Optional[int]
        The year assumed by dates that don't give one. If `None`, the current
        year.

    """

    course: str
    assignments: typing.List[RawAssignment]
    weight_rows: typing.List[typing.Tuple[str, str]] = dataclasses.field(
        default_factory=list
    )
    year: typing.Optional[int] = None

    def calculate(
        self, opts: typing.Optional[CalculatorOptions] = None
    ) -> GradeSummary:
        """Normalize the page's assignments and compute the overall grade."""
        records = normalize_assignments(self.assignments, year=self.year)
        weights = build_weight_table(self.weight_rows)
        return calculate(records, weights, opts=opts)


# private helpers ======================================================================


def _text(dct: dict, key: str) -> str:
    """Read a text field, treating a missing or null value as empty."""
    value = dct.get(key)
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(
            f"Field {key!r} should be text, not {value!r}."
        )
    return str(value)


def _raw_assignment(dct: dict) -> RawAssignment:
    try:
        kind = AssignmentKind(dct.get("kind") or "graded")
    except ValueError:
        raise ValueError(
            f"Assignment {dct.get('title')!r} has unknown kind {dct['kind']!r}."
        ) from None

    return RawAssignment(
        title=dct["title"],
        group=_text(dct, "group"),
        score_text=_text(dct, "score"),
        available_text=_text(dct, "available"),
        kind=kind,
        original_points_text=_text(dct, "original_points"),
        not_counted_flag_visible=bool(dct.get("not_counted_visible", False)),
        due_text=_text(dct, "due"),
        submitted_text=_text(dct, "submitted"),
        comments=[
            RawComment(text=_text(c, "text"), details=_text(c, "details"))
            for c in dct.get("comments") or []
        ],
    )


# public functions =====================================================================


def from_dict(dct: dict, *, year: typing.Optional[int] = None) -> GradePage:
    """Create a :class:`GradePage` from a dictionary.

    The dictionary has the form:

    .. code::

        {
            "course": "Math 20A",
            "assignments": [
                {
                    "title": "Homework 01",
                    "group": "Homework",
                    "score": "17",
                    "available": "/ 20",
                    "kind": "graded",
                    "original_points": "20",
                    "not_counted_visible": false,
                    "due": "Mar 5 at 11:59pm",
                    "submitted": "Mar 5 by 9:10pm",
                    "comments": [{"text": "Nice!", "details": "Jane Doe, Mar 6 at 1pm"}]
                }
            ],
            "weights": [{"group": "Homework", "weight": "40%"}]
        }

    Only an assignment's title is required. If the "weights" key is missing,
    the course is unweighted.

    Raises
    ------
    ValueError
        If the "assignments" key is missing or an assignment is malformed.

    """
    if "assignments" not in dct:
        raise ValueError("The page has no assignments table.")

    try:
        assignments = [_raw_assignment(a) for a in dct["assignments"]]
        weight_rows = [(w["group"], w["weight"]) for w in dct.get("weights", [])]
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed grades page: {exc!r}") from exc

    return GradePage(
        course=dct.get("course", ""),
        assignments=assignments,
        weight_rows=weight_rows,
        year=year,
    )


def read(
    path: Union[str, _pathlib.Path], *, year: typing.Optional[int] = None
) -> GradePage:
    """Read a grades page saved as JSON.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the JSON file that will be read.
    year : Optional[int]
        The year assumed by dates that don't give one. Default: the current
        year.

    Returns
    -------
    GradePage

    """
    with _pathlib.Path(path).open() as fileobj:
        return from_dict(_json.load(fileobj), year=year)
