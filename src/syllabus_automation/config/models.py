"""Course configuration data models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


def _text(value: Any) -> str | None:
    """Render a YAML scalar as text; YAML dates become ``YYYY-MM-DD``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _text_list(value: Any) -> list[str]:
    """Accept either a single scalar or a list of scalars."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return [str(value)]


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


@dataclass
class CourseInfo:
    """Course offering metadata."""

    code: str | None = None
    title: str | None = None
    section: str | None = None
    credits: int | float | None = None
    semester: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CourseInfo":
        credits = data.get("credits")
        return cls(
            code=_text(data.get("code")),
            title=_text(data.get("title")),
            section=_text(data.get("section")),
            credits=credits if isinstance(credits, (int, float)) and not isinstance(credits, bool) else None,
            semester=_text(data.get("semester")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
        )


@dataclass
class InstructorInfo:
    """Instructor contact details."""

    name: str | None = None
    email: str | None = None
    office: str | None = None
    phone: str | None = None
    office_hours: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InstructorInfo":
        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            office=_text(data.get("office")),
            phone=_text(data.get("phone")),
            office_hours=_text(data.get("office_hours")),
        )


@dataclass
class MeetingInfo:
    """Where and when the class meets."""

    location: str | None = None
    days: str | None = None
    time: str | None = None
    format: str = "Face-to-Face"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MeetingInfo":
        return cls(
            location=_text(data.get("location")),
            days=_text(data.get("days")),
            time=_text(data.get("time")),
            format=_text(data.get("format")) or "Face-to-Face",
        )


@dataclass
class CourseDescription:
    """Short catalog blurb and/or full description."""

    short: str | None = None
    full: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CourseDescription":
        return cls(
            short=_text(data.get("short")),
            full=_text(data.get("full")),
        )


@dataclass
class Textbook:
    """A required or optional course text."""

    title: str | None = None
    authors: list[str] = field(default_factory=list)
    edition: str | None = None
    publisher: str | None = None
    isbn: list[str] = field(default_factory=list)
    required: bool = True
    formats: list[str] = field(default_factory=lambda: ["print"])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Textbook":
        formats = _text_list(data.get("format"))
        required = data.get("required")
        return cls(
            title=_text(data.get("title")),
            authors=_text_list(data.get("authors")),
            edition=_text(data.get("edition")),
            publisher=_text(data.get("publisher")),
            isbn=_text_list(data.get("isbn")),
            required=True if required is None else bool(required),
            formats=formats or ["print"],
        )


@dataclass
class CourseConfig:
    """Complete course configuration for one syllabus build."""

    course: CourseInfo = field(default_factory=CourseInfo)
    instructor: InstructorInfo = field(default_factory=InstructorInfo)
    meeting: MeetingInfo = field(default_factory=MeetingInfo)
    description: CourseDescription = field(default_factory=CourseDescription)
    learning_outcomes: list[str] = field(default_factory=list)
    textbooks: list[Textbook] = field(default_factory=list)
    data_paths: dict[str, str | None] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CourseConfig":
        raw_textbooks = data.get("textbooks") or []
        if isinstance(raw_textbooks, (dict, str)):
            raw_textbooks = [raw_textbooks]
        elif not isinstance(raw_textbooks, list):
            raw_textbooks = []
        # A bare string entry is taken as the title
        textbooks = [
            Textbook.from_dict(tb) if isinstance(tb, dict) else Textbook(title=tb.strip())
            for tb in raw_textbooks
            if isinstance(tb, dict) or (isinstance(tb, str) and tb.strip())
        ]
        data_paths = {
            str(label): _text(path)
            for label, path in _section(data, "data_paths").items()
        }
        # A bare string is accepted as the full description
        raw_description = data.get("description")
        if isinstance(raw_description, str):
            description = CourseDescription(full=raw_description)
        else:
            description = CourseDescription.from_dict(_section(data, "description"))

        return cls(
            course=CourseInfo.from_dict(_section(data, "course")),
            instructor=InstructorInfo.from_dict(_section(data, "instructor")),
            meeting=MeetingInfo.from_dict(_section(data, "meeting")),
            description=description,
            learning_outcomes=_text_list(data.get("learning_outcomes")),
            textbooks=textbooks,
            data_paths=data_paths,
        )
