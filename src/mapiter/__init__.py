"""Array-style helpers for iterating over key-value mappings."""

from mapiter.core.exceptions import EmptyReductionError, MapiterError
from mapiter.functional import (
    entries,
    every,
    filter,
    find,
    find_key,
    flat,
    flat_map,
    for_each,
    includes,
    join,
    key_of,
    keys,
    map,
    map_keys,
    reduce,
    some,
    values,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyReductionError",
    "MapiterError",
    "entries",
    "every",
    "filter",
    "find",
    "find_key",
    "flat",
    "flat_map",
    "for_each",
    "includes",
    "join",
    "key_of",
    "keys",
    "map",
    "map_keys",
    "reduce",
    "some",
    "values",
]
