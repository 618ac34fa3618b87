"""Core definitions shared by the mapping helpers."""

from mapiter.core.config import DEFAULT_DEPTH, DEFAULT_SEPARATOR, Settings, settings
from mapiter.core.exceptions import EmptyReductionError, MapiterError
from mapiter.core.types import is_nested_mapping, strictly_equal

__all__ = [
    "DEFAULT_DEPTH",
    "DEFAULT_SEPARATOR",
    "Settings",
    "settings",
    "EmptyReductionError",
    "MapiterError",
    "is_nested_mapping",
    "strictly_equal",
]
