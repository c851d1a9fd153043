"""
Utility module.

Common utilities for logging, file handling, and default resolution.
"""

from .logging import setup_logging, get_logger
from .files import ensure_dir, resolve_path
from .defaults import coalesce, coalesce_text, get_config_value

__all__ = [
    "setup_logging",
    "get_logger",
    "ensure_dir",
    "resolve_path",
    "coalesce",
    "coalesce_text",
    "get_config_value",
]
