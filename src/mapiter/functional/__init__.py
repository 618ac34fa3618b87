"""Functional primitives for mappings.

This package provides the higher-order helpers of mapiter: the array-style
``map``/``filter``/``reduce`` family, predicate lookups and lazy enumeration,
all operating on key-value mappings. Helpers are stateless and
side-effect-free so they can be composed into small data pipelines.
"""

from mapiter.functional.enumeration import entries, keys, values
from mapiter.functional.queries import every, find, find_key, includes, key_of, some
from mapiter.functional.transforms import (
    filter,
    flat,
    flat_map,
    for_each,
    join,
    map,
    map_keys,
    reduce,
)

__all__ = [
    "entries",
    "keys",
    "values",
    "every",
    "some",
    "find",
    "find_key",
    "key_of",
    "includes",
    "map",
    "map_keys",
    "filter",
    "flat",
    "flat_map",
    "for_each",
    "reduce",
    "join",
]
