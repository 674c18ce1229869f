"""Tests of the command line interface."""

import json
import pathlib

import pandas as pd

from gradecalc.__main__ import main

# examples setup -----------------------------------------------------------------------

EXAMPLES_DIRECTORY = pathlib.Path(__file__).parent / "examples"
PAGE_EXAMPLE = EXAMPLES_DIRECTORY / "page.json"


def edited_page(tmp_path, midterm_score):
    """Write a copy of the example page with a different midterm score."""
    dct = json.loads(PAGE_EXAMPLE.read_text())
    for assignment in dct["assignments"]:
        if assignment["title"] == "Midterm":
            assignment["score"] = midterm_score

    path = tmp_path / "edited.json"
    path.write_text(json.dumps(dct))
    return path


# grade --------------------------------------------------------------------------------


def test_grade_prints_total(capsys):
    # when
    status = main(["grade", str(PAGE_EXAMPLE)])

    # then
    assert status == 0
    assert capsys.readouterr().out.strip() == "Total: 87.57%"


def test_grade_with_no_graded_assignments_fails(tmp_path, capsys):
    # given
    path = tmp_path / "page.json"
    path.write_text(json.dumps({"course": "Art 1", "assignments": []}))

    # when
    status = main(["grade", str(path)])

    # then
    assert status == 1
    assert "No graded assignments" in capsys.readouterr().out


def test_grade_with_missing_file_fails(tmp_path):
    assert main(["grade", str(tmp_path / "missing.json")]) == 2


# export -------------------------------------------------------------------------------


def test_export_csv_to_given_path(tmp_path):
    # given
    output = tmp_path / "out.csv"

    # when
    status = main(["export", str(PAGE_EXAMPLE), "--format", "csv", "-o", str(output)])

    # then
    assert status == 0
    table = pd.read_csv(output)
    assert list(table["title"]) == [
        "Homework 01",
        "Homework 02",
        "Participation",
        "Midterm",
        "Practice Quiz",
    ]


def test_export_defaults_to_file_named_after_course(tmp_path, monkeypatch):
    # given
    monkeypatch.chdir(tmp_path)

    # when
    status = main(["export", str(PAGE_EXAMPLE)])

    # then
    assert status == 0
    path = tmp_path / "math-20a-calculus-winter-2024-assignments.json"
    records = json.loads(path.read_text())
    assert records[0]["comments"][0]["name"] == "Jane Doe"


# whatif -------------------------------------------------------------------------------


def test_whatif_with_unchanged_page_shows_baseline(capsys):
    # when
    status = main(["whatif", str(PAGE_EXAMPLE), str(PAGE_EXAMPLE)])

    # then
    assert status == 0
    assert capsys.readouterr().out.strip() == "Total Grade: 87.57%"


def test_whatif_with_changed_score_shows_both_grades(tmp_path, capsys):
    # given
    edited = edited_page(tmp_path, "95%")

    # when
    status = main(["whatif", str(PAGE_EXAMPLE), str(edited)])

    # then
    assert status == 0
    assert (
        capsys.readouterr().out.strip()
        == "What-If Grade: 93.57% (Original: 87.57%)"
    )


def test_grade_with_null_score_still_grades_others(tmp_path, capsys):
    # given
    dct = json.loads(PAGE_EXAMPLE.read_text())
    dct["assignments"][1]["score"] = None
    path = tmp_path / "page.json"
    path.write_text(json.dumps(dct))

    # when
    status = main(["grade", str(path)])

    # then
    assert status == 0
    assert capsys.readouterr().out.startswith("Total: ")
