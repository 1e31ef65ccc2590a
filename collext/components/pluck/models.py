"""
Pluck component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PluckInput:
    """Input for plucking a property path."""

    sequence: Sequence[Any]
    path: str


@dataclass(frozen=True)
class PluckOutput:
    """Output from pluck operation."""

    values: list[Any]
    keys: tuple[str, ...]
    missing: int
    success: bool = True
