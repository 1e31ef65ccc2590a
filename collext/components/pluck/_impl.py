"""
Pluck functional core.

Extracts a property, or a nested property path, from every element.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from collext.primitives import pluck_one


@dataclass(frozen=True)
class PluckConfig:
    """Pluck configuration from rules."""

    path_separator: str = "."


DEFAULT_CONFIG = PluckConfig()


def split_path(path: Any, config: PluckConfig = DEFAULT_CONFIG) -> list[Any]:
    """Split path into its keys. Non-string paths are a single key."""
    if isinstance(path, str) and config.path_separator in path:
        return path.split(config.path_separator)
    return [path]


def pluck(
    sequence: Iterable[Any],
    path: Any,
    config: PluckConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """
    Pluck path from every element of sequence.

    A dotted path is resolved one key at a time, each key plucked from the
    list produced by the previous one. Missing keys yield None, so the
    result always has one entry per element.

    Usage:
        >>> pluck([{"p": {"c": 1}}, {"p": {"c": 2}}], "p.c")
        [1, 2]
    """
    keys = split_path(path, config)
    elements = pluck_one(sequence, keys[0])
    for key in keys[1:]:
        elements = pluck_one(elements, key)
    return elements
