"""Read assignment group weights."""

import logging
import typing

from .. import _util

logger = logging.getLogger(__name__)

WeightTable = typing.Dict[str, float]


def build_weight_table(
    rows: typing.Iterable[typing.Tuple[str, str]],
) -> WeightTable:
    """Build a table of group weights from the rows of the weights table.

    Each row is a group name and its weight as shown on the page, e.g.
    ``("Homework", "40%")``. The weight is read from the leading number in the
    text, so trailing percent signs and other text are ignored. The "Total" row
    is skipped.

    The weights are not checked to sum to one; courses whose weights sum to
    more (or less) are allowed.

    Parameters
    ----------
    rows : Iterable[tuple[str, str]]
        Pairs of group names and percentage text.

    Returns
    -------
    dict[str, float]
        A dictionary mapping group names to weights as fractions between 0 and 1.

    Example
    -------
    >>> build_weight_table([("Homework", "40%"), ("Exams", "60%"), ("Total", "100%")])
    {'Homework': 0.4, 'Exams': 0.6}

    """
    weights = {}
    for group, text in rows:
        if group == "Total":
            continue

        percentage = _util.parse_leading_float(text.strip())
        if not _util.is_finite(percentage):
            logger.warning("Ignoring weight %r for group %r.", text, group)
            continue

        weights[group] = percentage / 100

    return weights
