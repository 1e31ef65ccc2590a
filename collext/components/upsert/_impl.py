"""
Upsert functional core.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from collext.primitives import Matcher, reject


def upsert(base: Iterable[Any], match: Matcher, replacement: Any) -> list[Any]:
    """
    Drop every element of base that satisfies match, then append replacement.

    All matching elements are removed, not just the first one, and a single
    replacement goes to the end. With no match this is a plain append.

    Usage:
        >>> base = [{"id": 1, "data": 2}, {"id": 2, "data": 3}]
        >>> upsert(base, {"id": 2}, {"id": 2, "data": 5})
        [{'id': 1, 'data': 2}, {'id': 2, 'data': 5}]
    """
    remaining = reject(base, match)
    remaining.append(replacement)
    return remaining
