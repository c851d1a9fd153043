"""File handling utilities."""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path (for chaining)
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_path(file_path: str | Path, base_dir: Path | None = None) -> Path:
    """Resolve a possibly relative path against a base directory.

    Args:
        file_path: Path as written in a configuration file
        base_dir: Directory relative paths are anchored to (default: cwd)

    Returns:
        Absolute-or-anchored path; user home (``~``) is expanded
    """
    path = Path(file_path).expanduser()
    if not path.is_absolute():
        path = (base_dir or Path.cwd()) / path
    return path
