"""A package for computing course grade totals from a Canvas grades page."""

from .core import (
    AssignmentKind,
    AssignmentRecord,
    Comment,
    RawAssignment,
    RawComment,
    parse_date,
    normalize_score,
    normalize_assignment,
    normalize_assignments,
    build_weight_table,
    WeightTable,
    calculate,
    CalculatorOptions,
    GradeSummary,
    WhatIfController,
    GradeState,
    GradeView,
)

from . import io

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
    "io",
]
