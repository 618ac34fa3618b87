"""Lazy enumeration of a mapping's entries, keys and values.

Every helper in :mod:`mapiter.functional` walks a mapping through one of these
three primitives, so they define the enumeration order for the whole package:
whatever order the mapping itself iterates in (insertion order for ``dict``).

Each call returns a fresh single-pass iterator. Nothing is materialised up
front, so the caller decides how much of the mapping is actually visited.

Examples:
    >>> from mapiter.functional.enumeration import entries
    >>> list(entries({"a": 1, "b": 2}))
    [('a', 1), ('b', 2)]
"""

import typing as tp

from mapiter.core.types import Entry, K, V

__all__ = ["entries", "keys", "values"]


def entries(obj: tp.Mapping[K, V]) -> tp.Iterator[Entry]:
    """Iterate over the ``(key, value)`` pairs of ``obj`` in enumeration order.

    Args:
        obj: Mapping to enumerate.

    Yields:
        Entry: One ``(key, value)`` tuple per key of ``obj``.
    """
    for key in obj:
        yield key, obj[key]


def keys(obj: tp.Mapping[K, V]) -> tp.Iterator[K]:
    """Iterate over the keys of ``obj`` in enumeration order."""
    for key, _ in entries(obj):
        yield key


def values(obj: tp.Mapping[K, V]) -> tp.Iterator[V]:
    """Iterate over the values of ``obj`` in enumeration order."""
    for _, value in entries(obj):
        yield value
