"""
Merge component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MergeInput:
    """Input for merging two records."""

    src: Mapping[str, Any] | None
    dest: Mapping[str, Any] | None


@dataclass(frozen=True)
class MergeOutput:
    """Output from merge operation."""

    merged: dict[str, Any] = field(default_factory=dict)
    overridden: tuple[str, ...] = ()
    success: bool = True
