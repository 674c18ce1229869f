"""Types describing assignments, both as scraped and as normalized."""

import dataclasses
import enum
import typing

import pandas as pd


class AssignmentKind(enum.Enum):
    """How an assignment row on the grades page should be scored.

    The kind is determined once, when the row is scraped, so that later code
    never needs to look at the raw row again to decide how to treat it.

    """

    #: A row with an ordinary score.
    GRADED = "graded"

    #: A row marked with the complete/incomplete icon. These have no partial
    #: credit; a complete assignment is worth its full points.
    COMPLETE_INCOMPLETE = "complete_incomplete"

    #: Submitted, but not yet graded. Never counted.
    PENDING_SUBMISSION = "pending_submission"

    #: An ungraded assignment for which a hypothetical score has been entered.
    WHAT_IF = "what_if"


@dataclasses.dataclass
class RawComment:
    """A submission comment as it appears on the page.

    Attributes
    ----------
    text : str
        The body of the comment.
    details : str
        The author and date, as in ``"Jane Doe, Mar 5 at 3:10pm"``.

    """

    text: str
    details: str = ""


@dataclasses.dataclass
class RawAssignment:
    """The text fields of a single assignment row, as scraped from the page.

    Attributes
    ----------
    title : str
        The assignment's title.
    group : str
        The name of the assignment group (category) it belongs to.
    score_text : str
        The text of the score cell, e.g. ``"17"`` or ``"85%"``.
    available_text : str
        The text next to the score cell, e.g. ``"/ 20"``. May be empty.
    kind : AssignmentKind
        How the row should be scored. Default: ``AssignmentKind.GRADED``.
    original_points_text : str
        The points the assignment is worth. Only used for complete/incomplete
        assignments.
    not_counted_flag_visible : bool
        Whether the "does not count toward the final grade" marker is
        visible. Default: `False`.
    due_text : str
        The due date, e.g. ``"Mar 5 at 11:59pm"``. May be empty.
    submitted_text : str
        The submission date, e.g. ``"Mar 5 by 9am"``. May be empty.
    comments : list[RawComment]
        Submission comments, in the order they appear.

    """

    title: str
    group: str
    score_text: str = ""
    available_text: str = ""
    kind: AssignmentKind = AssignmentKind.GRADED
    original_points_text: str = ""
    not_counted_flag_visible: bool = False
    due_text: str = ""
    submitted_text: str = ""
    comments: typing.List[RawComment] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Comment:
    """A parsed submission comment."""

    text: str
    name: str
    date: typing.Optional[pd.Timestamp] = None


@dataclasses.dataclass
class AssignmentRecord:
    """A normalized assignment, ready for aggregation.

    Attributes
    ----------
    title : str
        The assignment's title.
    group : str
        The assignment group it belongs to.
    earned : float
        Points earned.
    available : float
        Points possible, in the same unit as `earned`. When the page shows a
        bare percentage, this is 100 and `earned` is the percentage.
    counts_toward_final_grade : bool
        If `False`, the assignment is left out of every total.
    due : Optional[pd.Timestamp]
        When the assignment is due, if known.
    submitted : Optional[pd.Timestamp]
        When the assignment was submitted, if known.
    comments : list[Comment]
        Submission comments, in source order.

    """

    title: str
    group: str
    earned: float
    available: float
    counts_toward_final_grade: bool = True
    due: typing.Optional[pd.Timestamp] = None
    submitted: typing.Optional[pd.Timestamp] = None
    comments: typing.List[Comment] = dataclasses.field(default_factory=list)

