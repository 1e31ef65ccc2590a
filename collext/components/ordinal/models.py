"""
Ordinal component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class OrdinalInput:
    """Input for ordinal suffix lookup."""

    number: float | Decimal


@dataclass(frozen=True)
class OrdinalOutput:
    """Output from ordinal operation."""

    suffix: str
    text: str
    success: bool = True
