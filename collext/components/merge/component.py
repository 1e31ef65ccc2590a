"""
Merge component - Deep, non-mutating record merge.

Shell Layer - wraps the functional core in input/output models.

Invariants:
- I1: src and dest are never mutated
- I2: the merged record shares no container with src
- I3: every top-level key of dest is present in the result
"""

from __future__ import annotations

from ._impl import immutable_merge
from .models import MergeInput, MergeOutput


def run_merge(inp: MergeInput) -> MergeOutput:
    """
    Merge inp.dest over inp.src.

    Returns:
        MergeOutput with the merged record and the top-level keys of src
        that dest replaced.
    """
    merged = immutable_merge(inp.src, inp.dest)
    src_keys = set(inp.src or {})
    overridden = tuple(key for key in (inp.dest or {}) if key in src_keys)

    return MergeOutput(merged=merged, overridden=overridden, success=True)
