"""Shared fixtures: a complete course configuration with its CSV tables."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from syllabus_automation.config.models import CourseConfig


SCHEDULE_CSV = """Week,Date,Topic
1,2026-01-21,Introduction to Economics
2,2026-01-28,Supply and Demand
3,2026-02-04,Elasticity
"""

ASSIGNMENTS_CSV = """Assignment,Type,Due_Date,Points,Percent,Notes
Problem Set 1,Homework,2026-02-06,50,10%,Chapters 1-2
Midterm,Exam,2026-03-12,100,30%,In class
"""

GRADING_CSV = """Grade,Range,GPA
A,93-100%,4.0
B,83-86%,3.0
"""


def course_data(data_dir: Path | None = None) -> dict:
    """A complete configuration mapping; data paths point into ``data_dir``."""
    data_dir = data_dir or Path("data")
    return {
        "course": {
            "code": "econ 201",
            "title": "  Principles of Microeconomics  ",
            "section": "001",
            "credits": "3",
            "semester": "sp2026",
            "start_date": "2026-01-21",
            "end_date": "2026-05-08",
        },
        "instructor": {
            "name": " Dr. Jordan Lee ",
            "email": "jlee@example.edu",
            "office": "Hall 310",
            "office_hours": "Tue 2-4 PM",
        },
        "meeting": {
            "location": "Room 101",
            "days": "Mon/Wed",
            "time": "10:00-11:15 AM",
        },
        "description": {
            "short": "Intro micro.",
            "full": "  An introduction to consumer and producer theory.  ",
        },
        "learning_outcomes": [
            "Explain supply and demand",
            "Compute elasticities",
        ],
        "textbooks": [
            {
                "title": "Principles of Economics",
                "authors": ["N. Gregory Mankiw"],
                "edition": "9th",
                "publisher": "Cengage",
                "isbn": ["978-0357038314", "0357038312"],
                "required": True,
                "format": ["print", "ebook"],
            }
        ],
        "data_paths": {
            "schedule": str(data_dir / "schedule.csv"),
            "assignments": str(data_dir / "assignments.csv"),
            "grading": str(data_dir / "grading.csv"),
        },
    }


def write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "schedule.csv").write_text(SCHEDULE_CSV, encoding="utf-8")
    (directory / "assignments.csv").write_text(ASSIGNMENTS_CSV, encoding="utf-8")
    (directory / "grading.csv").write_text(GRADING_CSV, encoding="utf-8")
    return directory


@pytest.fixture
def config_data(data_dir: Path) -> dict:
    return course_data(data_dir)


@pytest.fixture
def config_file(tmp_path: Path, config_data: dict) -> Path:
    return write_yaml(tmp_path / "course.yml", config_data)


@pytest.fixture
def course_config() -> CourseConfig:
    data = course_data()
    data["course"].update(code="ECON 201", title="Principles of Microeconomics",
                          credits=3, semester="SP2026")
    data["instructor"]["name"] = "Dr. Jordan Lee"
    return CourseConfig.from_dict(data)
