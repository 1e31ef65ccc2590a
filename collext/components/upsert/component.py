"""
Upsert component - Replace matching elements of a sequence.

Shell Layer - wraps the functional core in input/output models.

Invariants:
- I1: base is never mutated
- I2: len(items) == len(base) - removed + 1
- I3: replacement is the last element
"""

from __future__ import annotations

from ._impl import upsert
from .models import UpsertInput, UpsertOutput


def run_upsert(inp: UpsertInput) -> UpsertOutput:
    """
    Upsert inp.replacement into inp.base.

    Returns:
        UpsertOutput with the new sequence, the number of elements the
        matcher removed and whether nothing matched (a pure insert).
    """
    base = list(inp.base)
    items = upsert(base, inp.match, inp.replacement)
    removed = len(base) - (len(items) - 1)

    return UpsertOutput(
        items=items,
        removed=removed,
        inserted=removed == 0,
        success=True,
    )
