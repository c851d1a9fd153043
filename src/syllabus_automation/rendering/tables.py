"""HTML table renderers for the auxiliary course tables.

Tables are rendered with ``DataFrame.to_html`` using Bootstrap classes so
they pick up the site's table styling.
"""

import html
from typing import Any, Mapping

import pandas as pd

from ..config.validation import parse_iso_date
from ..utils.defaults import coalesce

STRIPED_HOVER = ["table", "table-striped", "table-hover"]
STRIPED_HOVER_CONDENSED = STRIPED_HOVER + ["table-sm"]
STRIPED_CONDENSED = ["table", "table-striped", "table-sm"]

SCHEDULE_PLACEHOLDER = "Schedule to be announced."
ASSIGNMENTS_PLACEHOLDER = "Assignments will be provided on Blackboard."

ASSIGNMENT_COLUMNS = ("Assignment", "Type", "Due_Date", "Points", "Percent")
FALLBACK_COLUMN_COUNT = 3

DEFAULT_GRADING_SCALE = {
    "Grade": ["A", "B", "C", "D", "F"],
    "Range": ["90-100%", "80-89%", "70-79%", "60-69%", "Below 60%"],
    "GPA": ["4.0", "3.0", "2.0", "1.0", "0.0"],
}

TABLE_CAPTIONS = {
    "schedule": "Course schedule showing meeting dates and topics",
    "grading": "Grade scale showing letter grades and percentage ranges",
    "assignments": "Assignment list with due dates and point values",
    "resources": "List of course resources and support services",
}


def _is_empty(df: pd.DataFrame | None) -> bool:
    return df is None or len(df) == 0


def _has_row_limit(max_rows: int | None) -> bool:
    """A limit below one means no limit."""
    return max_rows is not None and max_rows >= 1


def _find_column(df: pd.DataFrame, name: str) -> str | None:
    """Find a column by name, ignoring case."""
    for column in df.columns:
        if str(column).strip().lower() == name.lower():
            return column
    return None


def _format_date_column(df: pd.DataFrame, column: str, fmt: str) -> pd.DataFrame:
    """Return a copy with ISO dates in ``column`` rewritten using ``fmt``.

    Cells that are not ISO dates are kept as written.
    """
    def convert(value: Any) -> Any:
        parsed = parse_iso_date(value if not isinstance(value, str) else value.strip())
        return parsed.strftime(fmt) if parsed is not None else value

    df = df.copy()
    df[column] = df[column].map(convert)
    return df


def _to_html(
    df: pd.DataFrame,
    classes: list[str],
    escape: bool = True,
    caption: str | None = None,
) -> str:
    table_html = df.to_html(index=False, classes=classes, escape=escape, border=0, na_rep="")
    if caption:
        table_html = table_html.replace(
            ">", f">\n  <caption>{html.escape(caption)}</caption>", 1
        )
    return table_html


def create_table_caption(table_type: str, description: str | None = None) -> str:
    """Accessible caption text for a table of the given type."""
    caption = TABLE_CAPTIONS.get(table_type, "Course information table")
    if description:
        caption = f"{caption}: {description}"
    return caption


def format_schedule_table(
    schedule: pd.DataFrame | None,
    max_rows: int | None = None,
    caption: str | None = None,
) -> str:
    """Render the course schedule.

    Args:
        schedule: Loaded schedule table, or None if it did not load
        max_rows: Only render the first ``max_rows`` rows (for previews);
            None or a value below one renders every row
        caption: Optional table caption

    Returns:
        HTML table, or "Schedule to be announced." when there is no data
    """
    if _is_empty(schedule):
        return SCHEDULE_PLACEHOLDER

    if _has_row_limit(max_rows):
        schedule = schedule.head(max_rows)

    date_column = _find_column(schedule, "Date")
    if date_column is not None:
        schedule = _format_date_column(schedule, date_column, "%a, %b %d, %Y")

    return _to_html(schedule, STRIPED_HOVER, escape=False, caption=caption)


def format_default_grading_scale(caption: str | None = None) -> str:
    """The standard A-F scale used when no grading table is supplied."""
    return _to_html(
        pd.DataFrame(DEFAULT_GRADING_SCALE),
        STRIPED_HOVER_CONDENSED,
        escape=False,
        caption=caption,
    )


def format_grading_scale(grading: pd.DataFrame | None, caption: str | None = None) -> str:
    """Render the grading scale from its ``Grade`` and ``Range`` columns.

    Falls back to the default scale if the table is missing, empty, or does
    not have both columns.
    """
    if _is_empty(grading):
        return format_default_grading_scale(caption)

    grade = _find_column(grading, "Grade")
    grade_range = _find_column(grading, "Range")
    if grade is None or grade_range is None:
        return format_default_grading_scale(caption)

    return _to_html(
        grading[[grade, grade_range]],
        STRIPED_HOVER_CONDENSED,
        escape=False,
        caption=caption,
    )


def format_assignments(
    assignments: pd.DataFrame | None,
    max_rows: int | None = None,
    caption: str | None = None,
) -> str:
    """Render the assignment summary table.

    Uses the standard Assignment/Type/Due_Date/Points/Percent columns that
    are present; if none are, the first few columns are shown instead.
    ``max_rows`` below one is treated as no limit.
    """
    if _is_empty(assignments):
        return ASSIGNMENTS_PLACEHOLDER

    if _has_row_limit(max_rows):
        assignments = assignments.head(max_rows)

    due_date = _find_column(assignments, "Due_Date")
    if due_date is not None:
        assignments = _format_date_column(assignments, due_date, "%b %d, %Y")

    columns = [
        column
        for column in (_find_column(assignments, name) for name in ASSIGNMENT_COLUMNS)
        if column is not None
    ]
    if not columns:
        columns = list(assignments.columns[:FALLBACK_COLUMN_COUNT])

    return _to_html(assignments[columns], STRIPED_HOVER, caption=caption)


def format_named_list_table(values: Mapping[str, Any], caption: str | None = None) -> str:
    """Render a mapping as a two-column Label/Value table."""
    df = pd.DataFrame(
        {
            "Label": [str(label) for label in values],
            "Value": [str(coalesce(value, "")) for value in values.values()],
        }
    )
    return _to_html(df, STRIPED_CONDENSED, caption=caption)
