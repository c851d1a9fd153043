"""Tests for auxiliary CSV table loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from syllabus_automation.data.tables import TableLoadError, load_data_files, load_table
from syllabus_automation.issues import IssueKind


def test_load_table_reads_rows(data_dir: Path):
    table = load_table(data_dir / "schedule.csv")
    assert list(table.columns) == ["Week", "Date", "Topic"]
    assert len(table) == 3


def test_load_table_missing_file_raises(tmp_path: Path):
    with pytest.raises(TableLoadError):
        load_table(tmp_path / "missing.csv")


def test_zero_byte_file_loads_as_empty(tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert len(load_table(path)) == 0


def test_load_data_files_skips_problems_and_continues(tmp_path: Path, data_dir: Path):
    report = load_data_files(
        {
            "schedule": str(data_dir / "schedule.csv"),
            "assignments": str(tmp_path / "nope.csv"),
            "readings": "",
            "grading": str(data_dir / "grading.csv"),
        }
    )

    assert set(report.tables) == {"schedule", "grading"}
    assert not report.success
    assert [w.kind for w in report.warnings] == [
        IssueKind.TABLE_LOAD_WARNING,
        IssueKind.TABLE_LOAD_WARNING,
    ]
    assert report.warnings[1].text == "No path specified for readings"
    assert [m.text for m in report.messages] == [
        "Loaded schedule: 3 rows",
        "Loaded grading: 2 rows",
    ]


def test_malformed_csv_is_a_warning(tmp_path: Path):
    path = tmp_path / "bad.csv"
    path.write_text('a,b\n1,"unterminated\n', encoding="utf-8")

    report = load_data_files({"schedule": str(path)})

    assert report.tables == {}
    assert report.warnings[0].kind is IssueKind.TABLE_LOAD_WARNING
    assert report.warnings[0].text.startswith("Error loading schedule")


def test_relative_paths_resolve_against_base_dir(tmp_path: Path, data_dir: Path):
    report = load_data_files({"schedule": "data/schedule.csv"}, base_dir=tmp_path)
    assert len(report.tables["schedule"]) == 3
