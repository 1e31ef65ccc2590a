"""
Generic collection primitives.

Deep clone, deep merge, partial matching, reject and property lookup.
These are the building blocks every component composes.

Key behaviors:
- Mappings merge key-wise, lists merge index-wise (never concatenated)
- Partial matching compares nested mappings partially
- Property lookup never raises; missing values come back as None
- Strings are indexed by character, like lists
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

Predicate = Callable[[Any], bool]
Matcher = Mapping[str, Any] | Predicate | str | None


# --- Cloning ---


def clone_deep(value: Any) -> Any:
    """Return a deep copy of value."""
    return copy.deepcopy(value)


# --- Property Access ---


def _index_key(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def has_property(obj: Any, key: Any) -> bool:
    """Check whether obj carries key (mapping key, list index or attribute)."""
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return key in obj
    if isinstance(obj, Sequence):
        index = _index_key(key)
        return index is not None and 0 <= index < len(obj)
    return isinstance(key, str) and hasattr(obj, key)


def get_property(obj: Any, key: Any) -> Any:
    """
    Read key from obj.

    Mappings are read by key, sequences and strings by non-negative index
    (digit strings included) and any other object by attribute. Returns
    None when obj is None or the key is absent.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence):
        index = _index_key(key)
        if index is not None and 0 <= index < len(obj):
            return obj[index]
        return None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


def pluck_one(collection: Iterable[Any], key: Any) -> list[Any]:
    """Extract key from every element, one entry per element."""
    return [get_property(element, key) for element in collection]


# --- Merging ---


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _container_for(source: Any, existing: Any) -> Any:
    if isinstance(source, Mapping):
        if isinstance(existing, dict):
            return existing
        return dict(existing) if isinstance(existing, Mapping) else {}
    if isinstance(existing, list):
        return existing
    return list(existing) if isinstance(existing, tuple) else []


def _assign(target: Any, key: Any, value: Any) -> None:
    if isinstance(target, list) and key >= len(target):
        target.append(value)
    else:
        target[key] = value


def merge_into(target: Any, source: Any, memo: dict[int, Any] | None = None) -> Any:
    """
    Recursively merge source into target and return target.

    target is mutated in place; containers taken from source are rebuilt,
    so target never ends up holding a mapping or list owned by source.
    memo maps id() of each source container already visited to the
    container built for it, so self-referencing sources terminate and
    shared sub-containers stay shared in the result.
    """
    if memo is None:
        memo = {}
    memo[id(source)] = target

    items: Iterable[tuple[Any, Any]]
    if isinstance(source, Mapping):
        items = source.items()
    else:
        items = enumerate(source)

    for key, value in items:
        if isinstance(value, Mapping) or _is_array(value):
            if id(value) in memo:
                value = memo[id(value)]
            else:
                existing = get_property(target, key)
                value = merge_into(_container_for(value, existing), value, memo)
        _assign(target, key, value)
    return target


# --- Matching ---


def _strict_equal(actual: Any, expected: Any) -> bool:
    # bool never equals a number, even though True == 1 in Python
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    if isinstance(expected, Mapping):
        return (
            isinstance(actual, Mapping)
            and actual.keys() == expected.keys()
            and all(_strict_equal(actual[key], expected[key]) for key in expected)
        )
    if _is_array(expected):
        return (
            _is_array(actual)
            and len(actual) == len(expected)
            and all(_strict_equal(a, e) for a, e in zip(actual, expected, strict=True))
        )
    return bool(actual == expected)


def _partial_equal(actual: Any, expected: Any) -> bool:
    if isinstance(expected, Mapping):
        return isinstance(actual, Mapping) and is_match(actual, expected)
    return _strict_equal(actual, expected)


def is_match(obj: Any, source: Mapping[str, Any]) -> bool:
    """
    Partial deep comparison of obj against source.

    Every key of source must exist on obj with an equal value. Nested
    mappings in source are compared the same way, so they only need to be
    a subset of the corresponding value on obj.
    """
    for key, expected in source.items():
        if not has_property(obj, key):
            return False
        if not _partial_equal(get_property(obj, key), expected):
            return False
    return True


def matches(source: Mapping[str, Any]) -> Predicate:
    """Build a predicate testing elements against source with is_match."""
    snapshot = clone_deep(dict(source))
    return lambda obj: is_match(obj, snapshot)


def iteratee(match: Matcher) -> Predicate:
    """
    Normalize a matcher into a predicate.

    Accepts a callable, a partial mapping, a property name (truthiness of
    that property) or None (truthiness of the element itself).
    """
    if match is None:
        return bool
    if isinstance(match, Mapping):
        return matches(match)
    if isinstance(match, str):
        key = match
        return lambda obj: bool(get_property(obj, key))
    if callable(match):
        return match
    raise TypeError(f"Unsupported matcher type: {type(match).__name__}")


def reject(collection: Iterable[Any], match: Matcher) -> list[Any]:
    """Return the elements that do not satisfy match, in order."""
    predicate = iteratee(match)
    return [element for element in collection if not predicate(element)]
