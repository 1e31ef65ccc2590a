"""
Ordinal component - English ordinal suffixes.

Shell Layer - wraps the functional core in input/output models.
"""

from __future__ import annotations

from ._impl import ordinal, ordinalize
from .models import OrdinalInput, OrdinalOutput


def run_ordinal(inp: OrdinalInput) -> OrdinalOutput:
    """Compute the suffix and the ordinalized text for inp.number."""
    return OrdinalOutput(
        suffix=ordinal(inp.number),
        text=ordinalize(inp.number),
        success=True,
    )
