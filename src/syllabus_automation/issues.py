"""
Validation status values and loader exceptions.

Every check performed while loading a course configuration produces a
:class:`ValidationMessage`. A message without a kind is an informational
pass; a message with a kind is either an error or a warning depending on
that kind.
"""

from dataclasses import dataclass, field
from enum import Enum


class IssueKind(Enum):
    """Categories of problems the loader can report."""

    FILE_NOT_FOUND = "file_not_found"
    PARSE_ERROR = "parse_error"
    SCHEMA_VIOLATION = "schema_violation"
    DATE_FORMAT_ERROR = "date_format_error"
    DATE_ORDER_ERROR = "date_order_error"
    SEMESTER_FORMAT_WARNING = "semester_format_warning"
    TEXTBOOK_FORMAT_WARNING = "textbook_format_warning"
    TABLE_LOAD_WARNING = "table_load_warning"
    EMPTY_TABLE_WARNING = "empty_table_warning"
    NO_TABLES_LOADED = "no_tables_loaded"

    @property
    def is_error(self) -> bool:
        return self in _ERROR_KINDS


_ERROR_KINDS = frozenset(
    {
        IssueKind.FILE_NOT_FOUND,
        IssueKind.PARSE_ERROR,
        IssueKind.SCHEMA_VIOLATION,
        IssueKind.DATE_FORMAT_ERROR,
        IssueKind.DATE_ORDER_ERROR,
    }
)


@dataclass(frozen=True)
class ValidationMessage:
    """A single pass, failure or warning produced by a loading step."""

    text: str
    kind: IssueKind | None = None

    @property
    def passed(self) -> bool:
        return self.kind is None

    @property
    def is_error(self) -> bool:
        return self.kind is not None and self.kind.is_error

    @property
    def is_warning(self) -> bool:
        return self.kind is not None and not self.kind.is_error

    def __str__(self) -> str:
        if self.passed:
            marker = "✓"
        elif self.is_error:
            marker = "✗"
        else:
            marker = "!"
        return f"{marker} {self.text}"


def passed(text: str) -> ValidationMessage:
    return ValidationMessage(text)


def failed(kind: IssueKind, text: str) -> ValidationMessage:
    return ValidationMessage(text, kind)


@dataclass
class StepReport:
    """Outcome of one validation step."""

    valid: bool = True
    messages: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.is_error]

    @classmethod
    def from_messages(
        cls,
        messages: list[ValidationMessage],
        warnings: list[ValidationMessage] | None = None,
    ) -> "StepReport":
        return cls(
            valid=not any(m.is_error for m in messages),
            messages=list(messages),
            warnings=list(warnings or []),
        )


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class ConfigError(Exception):
    """Base error for course configuration loading."""

    def __init__(self, message: str, issues: list[ValidationMessage] | None = None):
        super().__init__(message)
        self.issues = list(issues or [])


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """Configuration file does not exist."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file is not a well-formed YAML mapping."""

    pass


class SchemaViolationError(ConfigError):
    """A required section or field is missing."""

    pass


class DateValidationError(ConfigError):
    """Course dates are malformed or out of order."""

    pass
