"""Tests for default resolution, path helpers and logging setup."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from syllabus_automation.utils import (
    coalesce,
    coalesce_text,
    ensure_dir,
    get_config_value,
    resolve_path,
    setup_logging,
)


def test_coalesce():
    assert coalesce(None, "TBA") == "TBA"
    assert coalesce(float("nan"), "TBA") == "TBA"
    assert coalesce(0, "TBA") == 0
    assert coalesce("", "TBA") == ""


def test_coalesce_text_treats_blank_as_missing():
    assert coalesce_text("   ", "TBA") == "TBA"
    assert coalesce_text(" Room 5 ", "TBA") == "Room 5"


def test_get_config_value():
    config = {"course": {"code": "ECON 201"}, "meeting": "online"}
    assert get_config_value(config, "course.code") == "ECON 201"
    assert get_config_value(config, "course.title", "TBA") == "TBA"
    assert get_config_value(config, "meeting.days") is None
    assert get_config_value(None, "course") is None


def test_resolve_path(tmp_path: Path):
    assert resolve_path("data/a.csv", tmp_path) == tmp_path / "data" / "a.csv"
    assert resolve_path(tmp_path / "b.csv") == tmp_path / "b.csv"


def test_ensure_dir(tmp_path: Path):
    target = ensure_dir(tmp_path / "a" / "b")
    assert target.is_dir()
    assert ensure_dir(target) == target


def test_setup_logging_accepts_level_names(tmp_path: Path):
    log_file = tmp_path / "logs" / "build.log"
    setup_logging(level="debug", log_file=log_file)
    try:
        assert logging.getLogger().level == logging.DEBUG
        logging.getLogger("syllabus_automation.test").debug("hello")
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging(level=logging.WARNING)


def test_setup_logging_writes_to_given_stream():
    buffer = io.StringIO()
    setup_logging(level="info", stream=buffer)
    try:
        logging.getLogger("syllabus_automation.test").info("routed")
        assert "routed" in buffer.getvalue()
    finally:
        setup_logging(level=logging.WARNING)
