"""Turn scraped assignment rows into normalized records."""

import logging
import typing

from .. import _util
from ._dates import parse_date
from ._records import (
    AssignmentKind,
    AssignmentRecord,
    Comment,
    RawAssignment,
    RawComment,
)

logger = logging.getLogger(__name__)


# private helpers ======================================================================


def _parse_comment(raw: RawComment, year: typing.Optional[int]) -> Comment:
    """Split the comment's details into the author's name and the date."""
    name, _, date_text = raw.details.strip().partition(",")
    try:
        date = parse_date(date_text, year=year)
    except ValueError as exc:
        logger.warning("Ignoring date of comment by %r: %s", name.strip(), exc)
        date = None
    return Comment(text=raw.text, name=name.strip(), date=date)


# public functions =====================================================================


def normalize_score(
    raw: RawAssignment,
) -> typing.Optional[typing.Tuple[float, float]]:
    """Determine the points earned and available from a row's score text.

    The score is read as follows:

        1. Complete/incomplete assignments are worth their original points,
           both earned and available.
        2. If the score contains a ``%``, or the text next to it has no ``/``,
           the score is a percentage: it is earned out of 100.
        3. Otherwise, the score is the points earned and the text next to it
           (``"/ 20"``) gives the points available.

    Parameters
    ----------
    raw : RawAssignment
        The scraped row.

    Returns
    -------
    Optional[tuple[float, float]]
        The pair ``(earned, available)``, or `None` if the assignment can't be
        scored: it is awaiting grading, or the score isn't a number (such as
        ``"-"`` for an ungraded assignment).

    """
    if raw.kind is AssignmentKind.PENDING_SUBMISSION:
        return None

    score = raw.score_text.strip()

    if raw.kind is AssignmentKind.COMPLETE_INCOMPLETE:
        earned = available = _util.parse_leading_float(raw.original_points_text)
    elif "%" in score or "/" not in raw.available_text:
        earned = _util.parse_leading_float(score.replace("%", ""))
        available = 100.0
    else:
        earned = _util.parse_leading_float(score)
        available = _util.parse_leading_float(raw.available_text.replace("/", ""))

    if not _util.is_finite(earned):
        return None

    return earned, available


def normalize_assignment(
    raw: RawAssignment, *, year: typing.Optional[int] = None
) -> typing.Optional[AssignmentRecord]:
    """Normalize a single scraped row into an :class:`AssignmentRecord`.

    Parameters
    ----------
    raw : RawAssignment
        The scraped row.
    year : Optional[int]
        The year assumed by dates which don't give one. See
        :func:`parse_date`.

    Returns
    -------
    Optional[AssignmentRecord]
        The record, or `None` if the assignment has no usable score.

    Raises
    ------
    ValueError
        If the due or submission date is malformed. A malformed comment date
        is logged and left out instead.

    """
    score = normalize_score(raw)
    if score is None:
        logger.debug("Skipping ungraded assignment %r.", raw.title)
        return None

    earned, available = score

    return AssignmentRecord(
        title=raw.title,
        group=raw.group,
        earned=earned,
        available=available,
        # the marker explains why an assignment is excluded; hidden means it counts
        counts_toward_final_grade=not raw.not_counted_flag_visible,
        due=parse_date(raw.due_text, year=year),
        submitted=parse_date(raw.submitted_text, year=year),
        comments=[_parse_comment(c, year) for c in raw.comments],
    )


def normalize_assignments(
    raws: typing.Iterable[RawAssignment], *, year: typing.Optional[int] = None
) -> typing.List[AssignmentRecord]:
    """Normalize every scraped row, skipping those that can't be used.

    A malformed row is logged and skipped; it never stops the others from being
    normalized.

    Parameters
    ----------
    raws : Iterable[RawAssignment]
        The scraped rows, in page order.
    year : Optional[int]
        The year assumed by dates which don't give one.

    Returns
    -------
    list[AssignmentRecord]
        The records, in page order.

    """
    records = []
    for raw in raws:
        try:
            record = normalize_assignment(raw, year=year)
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Skipping malformed assignment %r: %s", raw.title, exc)
            continue

        if record is not None:
            records.append(record)

    return records
