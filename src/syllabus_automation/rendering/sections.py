"""Markdown section renderers for a course configuration.

Each function takes a validated :class:`CourseConfig` and returns one
markdown fragment. Missing optional fields fall back to placeholder text.
"""

from ..config.models import CourseConfig, Textbook
from ..utils.defaults import coalesce_text
from .formatters import format_semester_display


def format_course_header(config: CourseConfig) -> str:
    """Title line plus section and semester."""
    course = config.course
    semester = format_semester_display(course.semester)
    return (
        f"# {coalesce_text(course.code, 'TBA')}: {coalesce_text(course.title, 'TBA')}\n\n"
        f"**Section:** {coalesce_text(course.section, 'TBA')} | **Semester:** {semester}"
    )


def format_instructor_info(config: CourseConfig) -> str:
    """Instructor name, contact details and office hours."""
    instructor = config.instructor
    lines: list[str] = []

    if instructor.name:
        lines.append(f"**Instructor:** {instructor.name}")
    if instructor.email:
        lines.append(f"**Email:** {instructor.email}")

    lines.append(f"**Office:** {coalesce_text(instructor.office, 'To be announced')}")

    if instructor.phone and instructor.phone.strip():
        lines.append(f"**Phone:** {instructor.phone}")

    hours = coalesce_text(instructor.office_hours, "By appointment (see Blackboard)")
    lines.append(f"**Office Hours:** {hours}")

    return "## Instructor Information\n" + "\n".join(lines)


def format_meeting_info(config: CourseConfig) -> str:
    meeting = config.meeting
    return (
        "## Class Meeting Information\n\n"
        f"- **Location:** {coalesce_text(meeting.location, 'TBA')}\n"
        f"- **Days & Time:** {coalesce_text(meeting.days, 'TBA')}, "
        f"{coalesce_text(meeting.time, 'TBA')}\n"
        f"- **Format:** {coalesce_text(meeting.format, 'Face-to-Face')}"
    )


def format_course_description(config: CourseConfig) -> str:
    """Full description if present, otherwise the short one."""
    description = config.description
    if description.full and description.full.strip():
        text = description.full
    elif description.short and description.short.strip():
        text = description.short
    else:
        text = "Course description not provided."

    return f"## Course Description\n\n{text.strip()}"


def format_learning_outcomes(config: CourseConfig) -> str:
    outcomes = [o for o in config.learning_outcomes if o.strip()]
    if not outcomes:
        return "## Learning Outcomes\n\nTo be announced."

    items = "\n".join(f"- {outcome.strip()}" for outcome in outcomes)
    return (
        "## Learning Outcomes\n\n"
        "By the end of this course, you will be able to:\n\n"
        f"{items}"
    )


def _format_textbook(book: Textbook) -> str:
    title = coalesce_text(book.title, "Unknown Title")
    authors = ", ".join(book.authors) or "Unknown Author"
    edition = coalesce_text(book.edition, "Latest Edition")
    publisher = coalesce_text(book.publisher, "Unknown Publisher")
    status = "**REQUIRED**" if book.required else "Optional"
    isbn = f" (ISBN: {' / '.join(book.isbn)})" if book.isbn else ""
    formats = ", ".join(book.formats or ["print"])

    return (
        f"- **{title}** ({edition})\n"
        f"  - Author: {authors}\n"
        f"  - Publisher: {publisher}{isbn}\n"
        f"  - Status: {status} | Available in: {formats}"
    )


def format_textbooks(config: CourseConfig) -> str:
    """Required and optional materials as a nested markdown list."""
    if not config.textbooks:
        return (
            "## Required Materials\n\n"
            "No required textbook. Course materials provided on Blackboard."
        )

    items = "\n\n".join(_format_textbook(book) for book in config.textbooks)
    return f"## Required Materials\n\n{items}"
