"""Services module - Business logic layer"""

from .diff_engine import DEFAULT_MAX_CELLS, DiffEngine, diff_lines
from .json_document import (
    canonicalize,
    format_json,
    minify_json,
    parse_json,
    sort_object_keys,
    validate_json,
)
from .comparator import JsonComparator
from .config_manager import ConfigManager

__all__ = [
    "DEFAULT_MAX_CELLS",
    "DiffEngine",
    "diff_lines",
    "canonicalize",
    "format_json",
    "minify_json",
    "parse_json",
    "sort_object_keys",
    "validate_json",
    "JsonComparator",
    "ConfigManager",
]
