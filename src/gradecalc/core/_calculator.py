"""Combine normalized assignments into group totals and an overall grade."""

import dataclasses
import logging
import typing

import pandas as pd

from .. import _util
from ._records import AssignmentRecord

logger = logging.getLogger(__name__)

#: the ways in which an unweighted course's groups can be combined
UNWEIGHTED_POLICIES = ("points", "mean")


# CalculatorOptions --------------------------------------------------------------------


@dataclasses.dataclass
class CalculatorOptions:
    """Configures the behavior of :func:`calculate`.

    Attributes
    ----------
    decimals : int
        Number of decimal places the overall grade is rounded to. Default: 2.

    unweighted_policy : str
        How the groups of a course without group weights are combined. Either
        ``"points"``, in which case the grade is the total points earned over
        the total points available, regardless of group; or ``"mean"``, in which
        case the grade is the simple average of the group percentages. The two
        differ when groups are worth different numbers of points. Default:
        ``"points"``.

    """

    decimals: int = 2
    unweighted_policy: str = "points"


# GradeSummary -------------------------------------------------------------------------


@dataclasses.dataclass
class GradeSummary:
    """The result of :func:`calculate`.

    Attributes
    ----------
    grade : Optional[float]
        The overall grade as a percentage between 0 and 100, rounded. `None` if
        there were no graded assignments.
    assignments : list[AssignmentRecord]
        Every assignment given to :func:`calculate`, including those that were
        not counted.
    group_totals : pd.DataFrame
        One row per assignment group, with columns ``total_earned`` and
        ``total_available``.
    group_percentages : pd.Series
        The percentage earned in each group. The percentage of a group with no
        points available is undefined and is missing (``pd.NA``).
    decimals : int
        The number of decimal places used when formatting the grade.

    """

    grade: typing.Optional[float]
    assignments: typing.List[AssignmentRecord]
    group_totals: pd.DataFrame
    group_percentages: pd.Series
    decimals: int = 2

    @property
    def formatted_grade(self) -> typing.Optional[str]:
        """The grade as a string with a fixed number of decimal places."""
        if self.grade is None:
            return None
        return f"{self.grade:.{self.decimals}f}"


# private helpers ======================================================================


def _counts(record: AssignmentRecord) -> bool:
    return (
        record.counts_toward_final_grade
        and _util.is_finite(record.earned)
        and _util.is_finite(record.available)
    )


def _group_totals(records: typing.Sequence[AssignmentRecord]) -> pd.DataFrame:
    """Total the points earned and available in each group, in order of appearance."""
    table = pd.DataFrame(
        {
            "group": pd.Series([r.group for r in records], dtype=object),
            "total_earned": pd.Series([r.earned for r in records], dtype=float),
            "total_available": pd.Series([r.available for r in records], dtype=float),
        }
    )
    return table.groupby("group", sort=False)[
        ["total_earned", "total_available"]
    ].sum()


def _group_percentages(group_totals: pd.DataFrame) -> pd.Series:
    """Percentage earned in each group; missing where nothing is available."""
    available = group_totals["total_available"]
    percentages = group_totals["total_earned"] / available.where(available > 0) * 100
    percentages.name = "percentage"
    return percentages.astype("Float64")


def _weighted_grade(group_percentages: pd.Series, weights: typing.Mapping) -> float:
    """Weighted average of the group percentages.

    Only the groups with a defined percentage contribute, so the result is
    renormalized by the weight actually used. Groups missing from the weights
    have a weight of zero.

    """
    defined = group_percentages.dropna().astype(float)
    weight = pd.Series(dict(weights), dtype=float).reindex(defined.index).fillna(0)

    total_weight = weight.sum()
    if total_weight == 0:
        return 0.0

    return float((defined * weight).sum() / total_weight)


def _combined_points_grade(group_totals: pd.DataFrame) -> float:
    """Total points earned over total points available in the valid groups."""
    valid = group_totals[group_totals["total_available"] > 0]
    total_available = valid["total_available"].sum()
    if total_available == 0:
        return 0.0
    return float(valid["total_earned"].sum() / total_available * 100)


def _mean_of_groups_grade(group_percentages: pd.Series) -> float:
    """Each group with a defined percentage, weighed equally."""
    defined = group_percentages.dropna().astype(float)
    if defined.empty:
        return 0.0
    return float(defined.mean())


# public functions =====================================================================


def calculate(
    assignments: typing.Sequence[AssignmentRecord],
    weights: typing.Optional[typing.Mapping[str, float]] = None,
    *,
    opts: typing.Optional[CalculatorOptions] = None,
) -> GradeSummary:
    """Compute the overall grade from a list of assignments.

    Assignments which do not count toward the final grade, or whose points are
    not numbers, are left out. The rest are totalled by group.

    If `weights` is empty, the course is unweighted and the groups are combined
    according to :attr:`CalculatorOptions.unweighted_policy`. Otherwise, the
    grade is the weighted average of the group percentages. Groups with no
    points available, and groups without a weight, are left out of the average,
    and the remaining weights are renormalized. If none remain, the grade is 0.

    Parameters
    ----------
    assignments : Sequence[AssignmentRecord]
        The normalized assignments.
    weights : Optional[Mapping[str, float]]
        A mapping from group names to weights, as built by
        :func:`build_weight_table`. If `None` or empty, the course is
        unweighted.
    opts : Optional[CalculatorOptions]
        Options configuring the calculation.

    Returns
    -------
    GradeSummary
        The grade and the group totals. If no assignment counts, the grade is
        `None`.

    Raises
    ------
    ValueError
        If `assignments` is `None`, or the options are invalid.

    """
    if assignments is None:
        raise ValueError("No assignments were provided.")

    opts = opts if opts is not None else CalculatorOptions()
    if opts.unweighted_policy not in UNWEIGHTED_POLICIES:
        raise ValueError(
            f"Unknown unweighted policy {opts.unweighted_policy!r}. "
            f"Must be one of {UNWEIGHTED_POLICIES}."
        )

    assignments = list(assignments)
    counted = [a for a in assignments if _counts(a)]

    group_totals = _group_totals(counted)
    group_percentages = _group_percentages(group_totals)

    def _summary(grade):
        return GradeSummary(
            grade=grade,
            assignments=assignments,
            group_totals=group_totals,
            group_percentages=group_percentages,
            decimals=opts.decimals,
        )

    if not counted:
        logger.warning("No graded assignments found.")
        return _summary(None)

    if weights:
        grade = _weighted_grade(group_percentages, weights)
    elif opts.unweighted_policy == "points":
        logger.info("Assignment groups are not weighted.")
        grade = _combined_points_grade(group_totals)
    else:
        logger.info("Assignment groups are not weighted; averaging groups.")
        grade = _mean_of_groups_grade(group_percentages)

    return _summary(round(grade, opts.decimals))
