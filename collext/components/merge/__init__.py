"""
Merge component - Deep merge without mutating either input.
"""

from ._impl import immutable_merge
from .component import run_merge
from .models import MergeInput, MergeOutput

__all__ = [
    # Entry points
    "run_merge",
    # Models
    "MergeInput",
    "MergeOutput",
    # Functional core
    "immutable_merge",
]
