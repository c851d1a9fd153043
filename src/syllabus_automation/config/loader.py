"""Course configuration loader.

Runs the full load sequence for one syllabus build: file check, YAML parse,
schema validation, field normalization, date validation, auxiliary table
loading and cross-reference checks.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from ..data.tables import load_data_files
from ..issues import (
    ConfigNotFoundError,
    ConfigParseError,
    DateValidationError,
    IssueKind,
    SchemaViolationError,
    StepReport,
    ValidationMessage,
    failed,
    passed,
)
from ..utils.defaults import get_config_value
from ..utils.logging import get_logger
from .models import CourseConfig
from .validation import (
    normalize_config_fields,
    validate_config_schema,
    validate_cross_references,
    validate_dates,
)

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Everything one configuration load produced."""

    success: bool
    messages: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    config: CourseConfig | None = None
    tables: dict[str, pd.DataFrame] = field(default_factory=dict)
    raw: dict[str, Any] | None = None

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.is_error]

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def table(self, label: str) -> pd.DataFrame | None:
        """Return a loaded table by label, or None if it did not load."""
        return self.tables.get(label)


class ConfigLoader:
    """Loads and validates course configuration files."""

    def __init__(self, base_dir: Path | None = None, strict: bool = True):
        """Initialize the config loader.

        Args:
            base_dir: Directory that relative ``data_paths`` resolve against.
                Defaults to the current working directory.
            strict: Raise on missing files, parse errors, schema and date
                failures instead of returning a failed result
        """
        self.base_dir = base_dir
        self.strict = strict

    def load(self, config_file: str | Path, strict: bool | None = None) -> LoadResult:
        """Load a course configuration and its auxiliary tables.

        Args:
            config_file: Path to the course YAML file
            strict: Overrides the loader's strict setting for this call

        Returns:
            LoadResult with status, messages, warnings, config and tables

        Raises:
            ConfigNotFoundError: In strict mode, if the file does not exist
            ConfigParseError: In strict mode, if the YAML is malformed
            SchemaViolationError: In strict mode, if required fields are missing
            DateValidationError: In strict mode, if dates are invalid or misordered
        """
        strict = self.strict if strict is None else strict
        path = Path(config_file).expanduser()
        messages: list[ValidationMessage] = []
        warnings: list[ValidationMessage] = []

        logger.info(f"Loading configuration: {path}")

        # Step 1: existence
        if not path.is_file():
            error = failed(IssueKind.FILE_NOT_FOUND, f"Configuration file not found: {path}")
            self._log(error)
            if strict:
                raise ConfigNotFoundError(error.text, [error])
            return LoadResult(success=False, messages=[error])

        self._record(messages, passed(f"Found config file: {path}"))

        # Step 2: parse
        try:
            raw = self._load_yaml(path)
        except ConfigParseError as e:
            error = failed(IssueKind.PARSE_ERROR, str(e))
            self._log(error)
            if strict:
                raise ConfigParseError(error.text, messages + [error]) from e
            return LoadResult(success=False, messages=messages + [error])

        self._record(messages, passed("YAML parsed successfully"))

        # Step 3: schema
        schema = validate_config_schema(raw)
        self._absorb(schema, messages, warnings)
        if not schema.valid:
            logger.warning(
                f"Schema validation failed for {get_config_value(raw, 'course.code', path.name)}"
            )
            if strict:
                raise SchemaViolationError(
                    "Configuration validation failed: "
                    + "; ".join(m.text for m in schema.errors),
                    schema.errors,
                )
            return LoadResult(
                success=False,
                messages=messages,
                warnings=warnings,
                config=CourseConfig.from_dict(raw),
                raw=raw,
            )

        # Step 4: normalization
        normalized, normalization_warnings = normalize_config_fields(raw)
        for warning in normalization_warnings:
            self._record(warnings, warning)
        self._record(messages, passed("Fields normalized"))
        config = CourseConfig.from_dict(normalized)

        # Step 5: dates
        dates = validate_dates(config.course)
        self._absorb(dates, messages, warnings)
        if not dates.valid and strict:
            raise DateValidationError(
                "Date validation failed: " + "; ".join(m.text for m in dates.errors),
                dates.errors,
            )

        # Step 6: auxiliary tables
        data_load = load_data_files(config.data_paths, self.base_dir)
        for message in data_load.messages:
            self._record(messages, message)
        for warning in data_load.warnings:
            self._record(warnings, warning)

        # Step 7: cross references
        cross_ref = validate_cross_references(data_load.tables)
        self._absorb(cross_ref, messages, warnings)

        success = schema.valid and dates.valid
        if success:
            logger.info(f"Configuration loaded successfully: {config.course.code}")
        else:
            logger.warning(f"Configuration loaded with errors: {config.course.code}")

        return LoadResult(
            success=success,
            messages=messages,
            warnings=warnings,
            config=config,
            tables=data_load.tables,
            raw=normalized,
        )

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load and parse a YAML file into a mapping."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"YAML parsing error: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"Could not read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"YAML parsing error: top level of {path.name} must be a mapping, "
                f"got {type(data).__name__}"
            )
        return data

    def _absorb(
        self,
        report: StepReport,
        messages: list[ValidationMessage],
        warnings: list[ValidationMessage],
    ) -> None:
        for message in report.messages:
            self._record(messages, message)
        for warning in report.warnings:
            self._record(warnings, warning)

    def _record(self, bucket: list[ValidationMessage], message: ValidationMessage) -> None:
        bucket.append(message)
        self._log(message)

    @staticmethod
    def _log(message: ValidationMessage) -> None:
        if message.is_error:
            logger.error(message.text)
        elif message.is_warning:
            logger.warning(message.text)
        else:
            logger.info(message.text)


def load_course_config(
    config_file: str | Path,
    strict: bool = True,
    base_dir: Path | None = None,
) -> LoadResult:
    """Load a course configuration with a one-off :class:`ConfigLoader`."""
    return ConfigLoader(base_dir=base_dir, strict=strict).load(config_file)
