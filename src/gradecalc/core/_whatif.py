"""Recompute the grade after hypothetical changes to the scores."""

import dataclasses
import enum
import logging
import typing

from ._calculator import GradeSummary

logger = logging.getLogger(__name__)


class GradeState(enum.Enum):
    """What the displayed grade represents."""

    #: the grade is the one originally computed
    BASELINE = "baseline"

    #: the grade differs from the original, because scores have been changed
    WHAT_IF = "what_if"


def transition(
    original_grade: typing.Optional[str], new_grade: typing.Optional[str]
) -> GradeState:
    """Determine the state given the original and the recomputed grades.

    Grades are compared as formatted strings, so differences hidden by rounding
    do not count as changes.

    """
    if new_grade == original_grade:
        return GradeState.BASELINE
    return GradeState.WHAT_IF


@dataclasses.dataclass(frozen=True)
class GradeView:
    """A grade ready to be displayed.

    Attributes
    ----------
    state : GradeState
        Whether this is the original grade or a what-if grade.
    grade : Optional[str]
        The current grade, formatted. `None` if nothing is graded.
    original_grade : Optional[str]
        The grade computed when the controller was created.

    """

    state: GradeState
    grade: typing.Optional[str]
    original_grade: typing.Optional[str]

    def label(self) -> str:
        """A line of text describing the grade.

        Example
        -------
        >>> GradeView(GradeState.WHAT_IF, "80.00", "85.00").label()
        'What-If Grade: 80.00% (Original: 85.00%)'

        """

        def _fmt(grade):
            return "N/A" if grade is None else f"{grade}%"

        if self.state is GradeState.BASELINE:
            return f"Total Grade: {_fmt(self.grade)}"

        return (
            f"What-If Grade: {_fmt(self.grade)} "
            f"(Original: {_fmt(self.original_grade)})"
        )


class WhatIfController:
    """Recomputes the grade on demand and compares it to the original.

    When created, the controller computes the grade once and keeps it as the
    original grade, which never changes afterwards. Each call to
    :meth:`recalculate` computes the grade again from the current scores. If
    it matches the original, the view is in the ``BASELINE`` state; otherwise
    it is in the ``WHAT_IF`` state and shows both grades.

    Parameters
    ----------
    compute : Callable[[], GradeSummary]
        A function which reads the current scores and computes the grade. It
        is called once on creation and once per recalculation.

    Attributes
    ----------
    view : GradeView
        The most recent view.

    Example
    -------
    >>> controller = WhatIfController(lambda: page.calculate())
    >>> controller.recalculate().label()
    'Total Grade: 91.25%'

    """

    def __init__(self, compute: typing.Callable[[], GradeSummary]):
        self._compute = compute
        self._original_grade = compute().formatted_grade
        self.view = GradeView(
            GradeState.BASELINE, self._original_grade, self._original_grade
        )

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} in state {self.state.name} "
            f"with original grade {self._original_grade!r}>"
        )

    @property
    def original_grade(self) -> typing.Optional[str]:
        """The grade computed when the controller was created."""
        return self._original_grade

    @property
    def state(self) -> GradeState:
        return self.view.state

    def recalculate(self) -> GradeView:
        """Recompute the grade and update the view.

        Returns
        -------
        GradeView
            The new view.

        """
        new_grade = self._compute().formatted_grade
        state = transition(self._original_grade, new_grade)
        logger.debug("Recalculated grade %r; state is %s.", new_grade, state.name)
        self.view = GradeView(state, new_grade, self._original_grade)
        return self.view
