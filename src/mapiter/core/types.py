"""Reusable type definitions for the mapiter helpers.

This module provides the type aliases shared by every helper together with the
two classification rules the helpers rely on:

Type Aliases:
    Entry: A ``(key, value)`` pair drawn from a mapping.
    Predicate: A callback ``fn(value, key, obj)`` whose result is tested for truthiness.
    Transform: A callback ``fn(value, key, obj)`` whose result is kept.
    Reducer: A callback ``fn(accumulator, value, key, obj)``.

Classification:
    is_nested_mapping: Whether a value should be merged by ``flat``/``flat_map``.
    strictly_equal: The equality used by ``key_of`` and ``includes``.
"""

import math
import numbers
import typing as tp
from collections.abc import Mapping

__all__ = [
    "K",
    "V",
    "Entry",
    "Predicate",
    "Transform",
    "Reducer",
    "is_nested_mapping",
    "strictly_equal",
]

K = tp.TypeVar("K")
V = tp.TypeVar("V")
R = tp.TypeVar("R")

Entry = tp.Tuple[K, V]
Predicate = tp.Callable[[V, K, tp.Mapping[K, V]], tp.Any]
Transform = tp.Callable[[V, K, tp.Mapping[K, V]], R]
Reducer = tp.Callable[[R, V, K, tp.Mapping[K, V]], R]

# Values compared by value rather than identity
_PRIMITIVES = (str, bytes, numbers.Number, type(None))


def _is_nan(value: tp.Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_nested_mapping(value: tp.Any) -> bool:
    """Return True if ``value`` is a mapping that flattening should merge.

    ``None`` is never a mapping, so it is always kept as a scalar.
    """
    return isinstance(value, Mapping)


def strictly_equal(left: tp.Any, right: tp.Any) -> bool:
    """Compare two values the way ``key_of`` and ``includes`` expect.

    Identical objects are equal, except float NaN which equals nothing, not
    even itself. Beyond identity, only primitives are compared by value:
    ``bool`` against ``bool``, numbers against numbers, ``str`` against ``str``
    and ``bytes`` against ``bytes``. Containers and arbitrary objects are
    equal only to themselves.

    Args:
        left: First operand.
        right: Second operand.

    Returns:
        bool: Whether the operands are strictly equal.
    """
    # NaN never equals anything, not even itself
    if _is_nan(left) or _is_nan(right):
        return False
    if left is right:
        return True
    if not isinstance(left, _PRIMITIVES) or not isinstance(right, _PRIMITIVES):
        return False
    # bool is a Number subclass, keep it apart from 0 and 1
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, numbers.Number) and isinstance(right, numbers.Number):
        return left == right
    return type(left) is type(right) and left == right
