"""Default-value resolution for optional configuration fields."""

from typing import Any, Mapping


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    # NaN is the only value not equal to itself (pandas cells, float("nan"))
    return isinstance(value, float) and value != value


def coalesce(value: Any, default: Any) -> Any:
    """Return ``value`` unless it is None or NaN, otherwise ``default``."""
    return default if _is_missing(value) else value


def coalesce_text(value: Any, default: str) -> str:
    """Like :func:`coalesce`, but also treats blank strings as missing."""
    if _is_missing(value):
        return default
    text = str(value).strip()
    return text or default


def get_config_value(config: Mapping[str, Any] | None, path: str, default: Any = None) -> Any:
    """Look up a dotted path (e.g. ``"course.code"``) in nested mappings.

    Args:
        config: Parsed configuration mapping
        path: Dot-separated key path
        default: Value returned when any segment is missing

    Returns:
        The value at ``path`` or ``default``
    """
    current: Any = config
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current
