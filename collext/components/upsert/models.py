"""
Upsert component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from collext.primitives import Matcher


@dataclass(frozen=True)
class UpsertInput:
    """Input for upserting into a sequence."""

    base: Sequence[Any]
    match: Matcher
    replacement: Any


@dataclass(frozen=True)
class UpsertOutput:
    """Output from upsert operation."""

    items: list[Any]
    removed: int
    inserted: bool
    success: bool = True
