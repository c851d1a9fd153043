"""
Rendering module.

Pure functions that turn a loaded course configuration and its auxiliary
tables into markdown/HTML syllabus fragments.
"""

from .formatters import (
    format_callout_box,
    format_credits,
    format_date_range,
    format_email_link,
    format_semester_display,
    format_wrapped_text,
)
from .sections import (
    format_course_description,
    format_course_header,
    format_instructor_info,
    format_learning_outcomes,
    format_meeting_info,
    format_textbooks,
)
from .tables import (
    create_table_caption,
    format_assignments,
    format_default_grading_scale,
    format_grading_scale,
    format_named_list_table,
    format_schedule_table,
)

__all__ = [
    "format_callout_box",
    "format_credits",
    "format_date_range",
    "format_email_link",
    "format_semester_display",
    "format_wrapped_text",
    "format_course_description",
    "format_course_header",
    "format_instructor_info",
    "format_learning_outcomes",
    "format_meeting_info",
    "format_textbooks",
    "create_table_caption",
    "format_assignments",
    "format_default_grading_scale",
    "format_grading_scale",
    "format_named_list_table",
    "format_schedule_table",
]
