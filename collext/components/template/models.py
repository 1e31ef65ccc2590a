"""
Template component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FormatPositionalInput:
    """Input for positional formatting."""

    template: str
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class FormatNamedInput:
    """Input for named formatting."""

    template: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FormatOutput:
    """Output from format operation."""

    text: str
    markers: int
    missing: tuple[str, ...] = ()
    success: bool = True
