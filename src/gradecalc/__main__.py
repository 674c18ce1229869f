"""Command line interface: compute, export and recalculate grades."""

import argparse
import logging
import sys
import typing

from .core import CalculatorOptions, WhatIfController
from .io import export, page

logger = logging.getLogger("gradecalc")


def _options(args: argparse.Namespace) -> CalculatorOptions:
    return CalculatorOptions(
        decimals=args.decimals, unweighted_policy=args.unweighted_policy
    )


def grade(args: argparse.Namespace) -> int:
    summary = page.read(args.page).calculate(_options(args))
    if summary.grade is None:
        print("No graded assignments found.")
        return 1

    print(f"Total: {summary.formatted_grade}%")
    return 0


def export_assignments(args: argparse.Namespace) -> int:
    grades_page = page.read(args.page)
    summary = grades_page.calculate()

    output = args.output
    if output is None:
        output = export.export_filename(grades_page.course, args.format)

    if args.format == "csv":
        export.write_csv(summary.assignments, output)
    else:
        export.write_json(summary.assignments, output)

    logger.info("Exported %d assignments to %s.", len(summary.assignments), output)
    return 0


def whatif(args: argparse.Namespace) -> int:
    # the baseline page is read on creation, the edited one on recalculation
    paths = iter([args.baseline, args.edited])
    opts = _options(args)
    controller = WhatIfController(lambda: page.read(next(paths)).calculate(opts))
    print(controller.recalculate().label())
    return 0


def main(argv: typing.Optional[typing.Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gradecalc", description="Calculate grade totals from a grades page."
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debugging messages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_calculation_options(subparser):
        subparser.add_argument(
            "--decimals", "-d", type=int, default=2, help="Decimal places to round to"
        )
        subparser.add_argument(
            "--unweighted-policy",
            choices=["points", "mean"],
            default="points",
            help="How groups are combined when the course has no weights",
        )

    grade_parser = subparsers.add_parser("grade", help="Print the total grade")
    grade_parser.add_argument("page", help="JSON grades page")
    add_calculation_options(grade_parser)
    grade_parser.set_defaults(func=grade)

    export_parser = subparsers.add_parser("export", help="Export the assignments")
    export_parser.add_argument("page", help="JSON grades page")
    export_parser.add_argument(
        "--format", "-f", choices=["json", "csv"], default="json"
    )
    export_parser.add_argument(
        "--output", "-o", help="Output path. Default: named after the course"
    )
    export_parser.set_defaults(func=export_assignments)

    whatif_parser = subparsers.add_parser(
        "whatif", help="Compare the grade of an edited page to the original"
    )
    whatif_parser.add_argument("baseline", help="JSON grades page as it was")
    whatif_parser.add_argument("edited", help="JSON grades page with changed scores")
    add_calculation_options(whatif_parser)
    whatif_parser.set_defaults(func=whatif)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        return args.func(args)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
