"""Tests for the end-to-end build and the console script."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import write_yaml
from syllabus_automation.cli import app
from syllabus_automation.main import FRAGMENT_ORDER, BuildError, SyllabusBuild

runner = CliRunner()


def test_build_renders_every_fragment(config_file: Path):
    fragments = SyllabusBuild(config_file).run()

    assert tuple(fragments) == FRAGMENT_ORDER
    assert fragments["header"].startswith("# ECON 201: Principles of Microeconomics")
    assert "Wed, Jan 21, 2026" in fragments["schedule"]
    assert "93-100%" in fragments["grading"]


def test_build_with_missing_schedule_uses_placeholder(
    tmp_path: Path, config_data: dict, data_dir: Path
):
    config_data["data_paths"]["schedule"] = str(data_dir / "missing.csv")
    path = write_yaml(tmp_path / "course.yml", config_data)

    build = SyllabusBuild(path)
    fragments = build.run()

    assert build.result.success
    assert fragments["schedule"] == "Schedule to be announced."


def test_build_max_rows(config_file: Path):
    fragments = SyllabusBuild(config_file, max_rows=1).run()
    assert "Introduction to Economics" in fragments["schedule"]
    assert "Elasticity" not in fragments["schedule"]


def test_build_without_config_raises(tmp_path: Path):
    with pytest.raises(BuildError):
        SyllabusBuild(tmp_path / "missing.yml").run()


def test_build_writes_fragments(tmp_path: Path, config_file: Path):
    written = SyllabusBuild(config_file).write(tmp_path / "out")

    assert [p.name for p in written] == [f"{name}.md" for name in FRAGMENT_ORDER]
    assert (tmp_path / "out" / "header.md").read_text(encoding="utf-8").startswith("# ECON 201")


def test_cli_validate_success(config_file: Path):
    result = runner.invoke(app, ["validate", str(config_file)])
    assert result.exit_code == 0
    assert "Configuration loaded successfully: ECON 201" in result.output


def test_cli_validate_failure(tmp_path: Path, config_data: dict):
    del config_data["course"]["title"]
    path = write_yaml(tmp_path / "course.yml", config_data)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Missing course.title" in result.output


def test_cli_validate_strict_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["validate", "--strict", str(tmp_path / "nope.yml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_cli_summary(config_file: Path):
    result = runner.invoke(app, ["summary", str(config_file)])
    assert result.exit_code == 0
    assert "Spring 2026" in result.output
    assert "3 credit hours" in result.output


def test_cli_render_to_directory(tmp_path: Path, config_file: Path):
    out = tmp_path / "fragments"
    result = runner.invoke(app, ["render", str(config_file), "--output", str(out)])

    assert result.exit_code == 0
    assert (out / "textbooks.md").exists()


def test_cli_render_keeps_log_records_off_stdout(
    tmp_path: Path, config_data: dict, data_dir: Path
):
    config_data["data_paths"]["schedule"] = str(data_dir / "missing.csv")
    path = write_yaml(tmp_path / "course.yml", config_data)

    result = runner.invoke(app, ["render", str(path)])

    assert result.exit_code == 0
    assert result.stdout.startswith("# ECON 201")
    assert "WARNING" not in result.stdout
    assert "Schedule to be announced." in result.stdout
    assert "missing.csv" in result.stderr
