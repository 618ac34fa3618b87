"""Transformations that build new mappings (or a single value) from a mapping.

The module mirrors the familiar sequence helpers for key-value data:
    - **map / map_keys**: Rewrite every value, or every key
    - **filter**: Keep the entries a predicate accepts
    - **flat / flat_map**: Merge nested mappings into the top level
    - **for_each**: Visit every entry for its side effects
    - **reduce**: Fold the entries into one accumulated value
    - **join**: Render the values as one string

Every helper that returns a mapping allocates a new ``dict``. The input mapping
is never mutated and never returned as-is, even when nothing changes.

Note:
    ``flat`` performs no cycle detection. Flattening a mapping that contains
    itself with ``depth=math.inf`` recurses until Python raises
    ``RecursionError``.

Examples:
    >>> from mapiter.functional.transforms import flat, reduce
    >>> flat({"a": 1, "b": {"c": 2}})
    {'a': 1, 'c': 2}
    >>> reduce({"a": 1, "b": 2, "c": 3}, lambda acc, value, key, obj: acc + value)
    6
"""

import typing as tp

from mapiter.core.config import DEFAULT_DEPTH, DEFAULT_SEPARATOR
from mapiter.core.exceptions import EmptyReductionError
from mapiter.core.types import K, Predicate, Reducer, Transform, V, is_nested_mapping
from mapiter.functional.enumeration import entries, values
from mapiter.logger.logger import logger

__all__ = [
    "map",
    "map_keys",
    "filter",
    "flat",
    "flat_map",
    "for_each",
    "reduce",
    "join",
]

# Marks an omitted ``initial`` so that ``None`` stays a valid seed
_MISSING = object()


def map(obj: tp.Mapping[K, V], fn: Transform) -> tp.Dict[K, tp.Any]:
    """Return a new dict with the same keys and values ``fn(value, key, obj)``.

    Keys are inserted in the source's enumeration order.
    """
    return {key: fn(value, key, obj) for key, value in entries(obj)}


def map_keys(obj: tp.Mapping[K, V], fn: Transform) -> tp.Dict[tp.Any, V]:
    """Return a new dict keyed by ``fn(value, key, obj)`` with the original values.

    When two entries produce the same key, the later entry in enumeration
    order wins.
    """
    result = {}
    for key, value in entries(obj):
        result[fn(value, key, obj)] = value
    return result


def filter(obj: tp.Mapping[K, V], fn: Predicate) -> tp.Dict[K, V]:
    """Return a new dict holding the entries for which ``fn`` is truthy."""
    return {key: value for key, value in entries(obj) if fn(value, key, obj)}


def flat(obj: tp.Mapping[K, V], depth: tp.Union[int, float] = DEFAULT_DEPTH) -> tp.Dict:
    """Merge nested mappings into the top level, up to ``depth`` levels deep.

    Scalar values, ``None`` included, stay under their own key. A nested
    mapping is itself flattened with ``depth - 1`` and its entries are merged
    into the result, overwriting any key already present.

    Args:
        obj: Mapping to flatten.
        depth: Number of levels to merge. ``0`` or less returns a shallow copy;
            ``math.inf`` merges until no nested mapping remains.

    Returns:
        Dict: A new flattened dict.

    Examples:
        >>> flat({"a": {"b": {"c": {"d": 1}}}}, 2)
        {'c': {'d': 1}}
    """
    logger.debug("Flattening %d entries with depth %s", len(obj), depth)

    result = {}
    for key, value in entries(obj):
        if depth > 0 and is_nested_mapping(value):
            result.update(flat(value, depth - 1))
        else:
            result[key] = value
    return result


def flat_map(obj: tp.Mapping[K, V], fn: Transform) -> tp.Dict:
    """Map every entry with ``fn`` and merge mapping results into the top level.

    A mapping returned by ``fn`` has its entries merged into the result
    (later entries win on collision). Any other result, ``None`` included, is
    kept under the original key. Results are never flattened more than one
    level.
    """
    result = {}
    for key, value in entries(obj):
        mapped = fn(value, key, obj)
        if is_nested_mapping(mapped):
            result.update(mapped)
        else:
            result[key] = mapped
    return result


def for_each(obj: tp.Mapping[K, V], fn: Transform) -> None:
    """Invoke ``fn(value, key, obj)`` for every entry of ``obj``, in order."""
    for key, value in entries(obj):
        fn(value, key, obj)


def reduce(obj: tp.Mapping[K, V], fn: Reducer, initial: tp.Any = _MISSING) -> tp.Any:
    """Fold the entries of ``obj`` into a single value.

    ``fn`` is called as ``fn(accumulator, value, key, obj)`` for each entry in
    enumeration order. Without ``initial`` the first value seeds the
    accumulator and ``fn`` starts from the second entry, so a single-entry
    mapping returns its value without calling ``fn`` at all.

    Args:
        obj: Mapping to reduce.
        fn: Reducer called as ``fn(accumulator, value, key, obj)``.
        initial: Optional seed for the accumulator. ``None`` is a valid seed.

    Returns:
        The final accumulator.

    Raises:
        EmptyReductionError: If ``obj`` is empty and no ``initial`` is given.
    """
    iterator = entries(obj)

    if initial is _MISSING:
        try:
            _, accumulator = next(iterator)
        except StopIteration:
            logger.debug("Rejecting reduce() over an empty mapping without a seed")
            raise EmptyReductionError() from None
    else:
        accumulator = initial

    for key, value in iterator:
        accumulator = fn(accumulator, value, key, obj)
    return accumulator


def join(obj: tp.Mapping[K, V], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join the ``str()`` of every value of ``obj`` with ``separator``."""
    return separator.join(str(value) for value in values(obj))
