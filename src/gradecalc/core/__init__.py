from ._records import (
    AssignmentKind,
    AssignmentRecord,
    Comment,
    RawAssignment,
    RawComment,
)
from ._dates import parse_date
from ._scores import normalize_score, normalize_assignment, normalize_assignments
from ._weights import build_weight_table, WeightTable
from ._calculator import calculate, CalculatorOptions, GradeSummary
from ._whatif import WhatIfController, GradeState, GradeView, transition

__all__ = [
    "AssignmentKind",
    "AssignmentRecord",
    "Comment",
    "RawAssignment",
    "RawComment",
    "parse_date",
    "normalize_score",
    "normalize_assignment",
    "normalize_assignments",
    "build_weight_table",
    "WeightTable",
    "calculate",
    "CalculatorOptions",
    "GradeSummary",
    "WhatIfController",
    "GradeState",
    "GradeView",
    "transition",
]
