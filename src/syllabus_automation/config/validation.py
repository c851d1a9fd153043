"""
Schema, normalization, date and cross-reference checks for course configs.

Each check returns a :class:`StepReport` rather than raising, so the loader
can decide whether a failure aborts the build (strict mode) or is only
reported.
"""

import copy
import re
from datetime import date, datetime
from typing import Any, Mapping

from ..issues import IssueKind, StepReport, ValidationMessage, failed, passed
from .models import CourseInfo

REQUIRED_SECTIONS = ("course", "instructor", "meeting", "data_paths", "description")

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "course": ("code", "title", "section", "credits", "semester"),
    "instructor": ("name", "email"),
    "meeting": ("location", "days", "time"),
}

SEMESTER_PATTERN = re.compile(r"^(SP|FA|SU|WI)[0-9]{4}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_DISPLAY_FORMAT = "%b %d, %Y"

TABLE_LABELS = {
    "schedule": "Course schedule",
    "assignments": "Assignments",
    "grading": "Grading scale",
}


# -----------------------------------------------------------------------------
# Schema
# -----------------------------------------------------------------------------


def validate_config_schema(data: Mapping[str, Any]) -> StepReport:
    """Check that every required section and sub-field is present.

    Args:
        data: Parsed YAML mapping

    Returns:
        StepReport with one message per section and one failure per missing field
    """
    messages: list[ValidationMessage] = []

    for section in REQUIRED_SECTIONS:
        if section in data:
            messages.append(passed(f"Found section: '{section}'"))
        else:
            messages.append(
                failed(IssueKind.SCHEMA_VIOLATION, f"Missing required section: '{section}'")
            )

    for section, fields in REQUIRED_FIELDS.items():
        if section not in data:
            continue
        values = data[section]
        if not isinstance(values, Mapping):
            messages.append(
                failed(IssueKind.SCHEMA_VIOLATION, f"Section '{section}' must be a mapping")
            )
            continue
        for name in fields:
            if name not in values:
                messages.append(
                    failed(IssueKind.SCHEMA_VIOLATION, f"Missing {section}.{name}")
                )

    return StepReport.from_messages(messages)


# -----------------------------------------------------------------------------
# Normalization
# -----------------------------------------------------------------------------


def normalize_semester(value: Any) -> str | None:
    """Trim and upper-case a semester code such as ``sp2026``."""
    if value is None:
        return None
    return str(value).strip().upper()


def is_valid_semester(value: str | None) -> bool:
    return bool(value) and SEMESTER_PATTERN.match(value) is not None


def coerce_credits(value: Any) -> int | float | None:
    """Convert a credits value to a number, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if number != number:
        return None
    return int(number) if number.is_integer() else number


def _strip(section: dict[str, Any], key: str) -> None:
    value = section.get(key)
    if isinstance(value, str):
        section[key] = value.strip()


def normalize_textbooks(value: Any) -> tuple[list[dict[str, Any]], list[ValidationMessage]]:
    """Coerce the ``textbooks`` entry to a list of mappings.

    A single mapping or string is wrapped in a list, and a string entry is
    taken as the book title. Anything else is dropped. Each coercion is
    reported as a ``TEXTBOOK_FORMAT_WARNING``.
    """
    warnings: list[ValidationMessage] = []

    if value is None:
        return [], warnings
    if isinstance(value, (dict, str)):
        warnings.append(
            failed(
                IssueKind.TEXTBOOK_FORMAT_WARNING,
                "textbooks should be a list; treating the single entry as one book",
            )
        )
        value = [value]
    elif not isinstance(value, list):
        warnings.append(
            failed(
                IssueKind.TEXTBOOK_FORMAT_WARNING,
                f"textbooks should be a list, got {type(value).__name__}; ignored",
            )
        )
        return [], warnings

    textbooks: list[dict[str, Any]] = []
    for position, entry in enumerate(value, start=1):
        if isinstance(entry, dict):
            textbooks.append(entry)
        elif isinstance(entry, str) and entry.strip():
            textbooks.append({"title": entry.strip()})
            warnings.append(
                failed(
                    IssueKind.TEXTBOOK_FORMAT_WARNING,
                    f"Textbook {position} is plain text; using it as the title: {entry.strip()}",
                )
            )
        else:
            warnings.append(
                failed(
                    IssueKind.TEXTBOOK_FORMAT_WARNING,
                    f"Textbook {position} is not a mapping and was ignored: {entry!r}",
                )
            )
    return textbooks, warnings


def normalize_config_fields(
    data: Mapping[str, Any],
) -> tuple[dict[str, Any], list[ValidationMessage]]:
    """Return a normalized copy of a parsed configuration.

    Trims free-text fields, upper-cases the course code and semester,
    coerces credits to a number and reshapes ``textbooks`` into a list of
    mappings. The input mapping is left untouched.

    Args:
        data: Parsed YAML mapping

    Returns:
        Tuple of (normalized mapping, warnings)
    """
    config = copy.deepcopy(dict(data))
    warnings: list[ValidationMessage] = []

    course = config.get("course")
    if isinstance(course, dict):
        _strip(course, "title")
        if course.get("credits") is not None:
            course["credits"] = coerce_credits(course["credits"])
        if course.get("code") is not None:
            course["code"] = str(course["code"]).strip().upper()
        if course.get("semester") is not None:
            course["semester"] = normalize_semester(course["semester"])
            if not is_valid_semester(course["semester"]):
                warnings.append(
                    failed(
                        IssueKind.SEMESTER_FORMAT_WARNING,
                        f"Semester format unusual: {course['semester']}. "
                        "Expected format: SPYYYY, FAYYYY, SUYYYY or WIYYYY",
                    )
                )

    description = config.get("description")
    if isinstance(description, dict):
        _strip(description, "full")
        _strip(description, "short")
    elif isinstance(description, str):
        config["description"] = description.strip()

    instructor = config.get("instructor")
    if isinstance(instructor, dict):
        _strip(instructor, "name")
        _strip(instructor, "email")

    if "textbooks" in config:
        config["textbooks"], textbook_warnings = normalize_textbooks(config["textbooks"])
        warnings.extend(textbook_warnings)

    return config, warnings


# -----------------------------------------------------------------------------
# Dates
# -----------------------------------------------------------------------------


def parse_iso_date(value: Any) -> date | None:
    """Parse a ``YYYY-MM-DD`` string (or a date object) into a date.

    Returns:
        The date, or None if the value is missing or not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value.strip()):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def validate_dates(course: CourseInfo) -> StepReport:
    """Validate course start/end dates and their ordering.

    Args:
        course: Course section of a loaded configuration

    Returns:
        StepReport; invalid or missing dates and misordering are failures
    """
    messages: list[ValidationMessage] = []
    parsed: dict[str, date | None] = {}

    for name in ("start_date", "end_date"):
        raw = getattr(course, name)
        value = parse_iso_date(raw)
        parsed[name] = value
        if raw is None or raw == "":
            messages.append(
                failed(IssueKind.DATE_FORMAT_ERROR, f"Missing {name}. Use YYYY-MM-DD")
            )
        elif value is None:
            messages.append(
                failed(IssueKind.DATE_FORMAT_ERROR, f"Invalid {name} format: {raw}. Use YYYY-MM-DD")
            )
        else:
            messages.append(passed(f"{name} valid: {value.strftime(DATE_DISPLAY_FORMAT)}"))

    start, end = parsed["start_date"], parsed["end_date"]
    if start is not None and end is not None:
        if start >= end:
            messages.append(
                failed(IssueKind.DATE_ORDER_ERROR, "start_date must be before end_date")
            )
        else:
            messages.append(passed("start_date is before end_date"))

    return StepReport.from_messages(messages)


# -----------------------------------------------------------------------------
# Cross references
# -----------------------------------------------------------------------------


def validate_cross_references(tables: Mapping[str, Any] | None) -> StepReport:
    """Confirm that each loaded auxiliary table has at least one row.

    Only row counts are checked; table contents are not compared with each
    other.

    Args:
        tables: Mapping of table label to loaded DataFrame

    Returns:
        StepReport; empty tables produce warnings, never failures
    """
    messages: list[ValidationMessage] = []
    warnings: list[ValidationMessage] = []

    if not tables:
        warnings.append(
            failed(
                IssueKind.NO_TABLES_LOADED,
                "No data files loaded, skipping cross-reference validation",
            )
        )
        return StepReport.from_messages(messages, warnings)

    for label, table in tables.items():
        name = TABLE_LABELS.get(label, label.replace("_", " ").capitalize())
        rows = len(table)
        if rows > 0:
            messages.append(passed(f"{name} has {rows} entries"))
        else:
            warnings.append(failed(IssueKind.EMPTY_TABLE_WARNING, f"{name} file is empty"))

    return StepReport.from_messages(messages, warnings)
