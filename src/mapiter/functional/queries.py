"""Predicate-driven lookups over mappings.

All of these stop enumerating as soon as their answer is known: the callback is
never invoked for entries after the first one that determines the result.
Callbacks receive ``(value, key, obj)``.

Lookups that can miss (``find``, ``find_key``, ``key_of``) return ``default``
when nothing matches. The miss is tracked separately from the matched value,
so a mapping whose keys or values look like the default never produces a
false negative.
"""

import typing as tp

from mapiter.core.types import K, Predicate, V, strictly_equal
from mapiter.functional.enumeration import entries, values

__all__ = ["every", "some", "find", "find_key", "key_of", "includes"]

D = tp.TypeVar("D")


def _first_entry(
    obj: tp.Mapping[K, V], fn: Predicate
) -> tp.Optional[tp.Tuple[K, V]]:
    for key, value in entries(obj):
        if fn(value, key, obj):
            return key, value
    return None


def every(obj: tp.Mapping[K, V], fn: Predicate) -> bool:
    """Return whether ``fn`` is truthy for every entry of ``obj``.

    An empty mapping is vacuously True. Stops at the first falsy result.
    """
    for key, value in entries(obj):
        if not fn(value, key, obj):
            return False
    return True


def some(obj: tp.Mapping[K, V], fn: Predicate) -> bool:
    """Return whether ``fn`` is truthy for at least one entry of ``obj``.

    An empty mapping gives False. Stops at the first truthy result.
    """
    return _first_entry(obj, fn) is not None


def find(
    obj: tp.Mapping[K, V], fn: Predicate, default: D = None
) -> tp.Union[V, D]:
    """Return the value of the first entry for which ``fn`` is truthy.

    Args:
        obj: Mapping to search.
        fn: Predicate called as ``fn(value, key, obj)``.
        default: Returned when no entry matches.

    Returns:
        The matching value, or ``default``.
    """
    match = _first_entry(obj, fn)
    if match is None:
        return default
    return match[1]


def find_key(
    obj: tp.Mapping[K, V], fn: Predicate, default: D = None
) -> tp.Union[K, D]:
    """Return the key of the first entry for which ``fn`` is truthy.

    Args:
        obj: Mapping to search.
        fn: Predicate called as ``fn(value, key, obj)``.
        default: Returned when no entry matches.

    Returns:
        The matching key, or ``default``.
    """
    match = _first_entry(obj, fn)
    if match is None:
        return default
    return match[0]


def key_of(obj: tp.Mapping[K, V], value: tp.Any, default: D = None) -> tp.Union[K, D]:
    """Return the key of the first entry whose value is strictly equal to ``value``.

    See :func:`mapiter.core.types.strictly_equal` for the comparison used.
    """
    return find_key(obj, lambda candidate, key, _: strictly_equal(candidate, value), default)


def includes(obj: tp.Mapping[K, V], value: tp.Any) -> bool:
    """Return whether some value of ``obj`` is strictly equal to ``value``."""
    return any(strictly_equal(candidate, value) for candidate in values(obj))
