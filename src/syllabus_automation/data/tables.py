"""Auxiliary table loading with pandas."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import pandas as pd

from ..issues import IssueKind, ValidationMessage, failed, passed
from ..utils.files import resolve_path
from ..utils.logging import get_logger

logger = get_logger(__name__)


class TableLoadError(Exception):
    """An auxiliary table could not be read."""

    pass


@dataclass
class TableLoadReport:
    """Outcome of loading every table listed under ``data_paths``."""

    tables: dict[str, pd.DataFrame] = field(default_factory=dict)
    success: bool = True
    messages: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)


def load_table(path: Path) -> pd.DataFrame:
    """Read one CSV table.

    A file with no content at all is returned as an empty DataFrame so that
    it is reported as empty rather than unreadable.

    Args:
        path: Path to the CSV file

    Returns:
        Loaded DataFrame

    Raises:
        TableLoadError: If the file is missing or cannot be parsed
    """
    if not path.is_file():
        raise TableLoadError(f"File not found: {path}")

    try:
        return pd.read_csv(path, encoding="utf-8")
    except pd.errors.EmptyDataError:
        logger.debug(f"Empty CSV file: {path}")
        return pd.DataFrame()
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise TableLoadError(f"Could not read {path}: {e}") from e


def load_data_files(
    data_paths: Mapping[str, str | None],
    base_dir: Path | None = None,
) -> TableLoadReport:
    """Load every table referenced in a configuration's ``data_paths``.

    Problems with any single table are recorded as warnings and the table is
    left out of the result; loading always continues with the next one.

    Args:
        data_paths: Mapping of table label to file path
        base_dir: Directory relative paths are resolved against (default: cwd)

    Returns:
        TableLoadReport with the tables that loaded
    """
    report = TableLoadReport()

    for label, raw_path in data_paths.items():
        if raw_path is None or not str(raw_path).strip():
            report.warnings.append(
                failed(IssueKind.TABLE_LOAD_WARNING, f"No path specified for {label}")
            )
            continue

        path = resolve_path(str(raw_path).strip(), base_dir)
        if not path.exists():
            report.success = False
            report.warnings.append(
                failed(IssueKind.TABLE_LOAD_WARNING, f"File not found for {label}: {raw_path}")
            )
            continue

        try:
            table = load_table(path)
        except TableLoadError as e:
            report.success = False
            report.warnings.append(
                failed(IssueKind.TABLE_LOAD_WARNING, f"Error loading {label}: {e}")
            )
            continue

        report.tables[label] = table
        report.messages.append(passed(f"Loaded {label}: {len(table)} rows"))

    return report
