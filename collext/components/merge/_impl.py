"""
Merge functional core.

Deep merge of two records that leaves both inputs untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from collext.primitives import clone_deep, merge_into


def immutable_merge(
    src: Mapping[str, Any] | None,
    dest: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """
    Merge dest over a deep copy of src.

    Nested mappings merge recursively, lists merge index-wise and any other
    value in dest overwrites. Neither argument is mutated.

    Usage:
        >>> immutable_merge({"a": 1, "b": 2}, {"c": 3, "d": 4})
        {'a': 1, 'b': 2, 'c': 3, 'd': 4}
    """
    if src is not None and not isinstance(src, Mapping):
        raise TypeError(f"src must be a mapping, got {type(src).__name__}")
    if dest is not None and not isinstance(dest, Mapping):
        raise TypeError(f"dest must be a mapping, got {type(dest).__name__}")

    merged: dict[str, Any] = dict(clone_deep(src)) if src is not None else {}
    if dest is None:
        return merged
    merge_into(merged, dest)
    return merged
