"""
Ordinal component - "st", "nd", "rd" and "th" suffixes.
"""

from ._impl import ordinal, ordinalize
from .component import run_ordinal
from .models import OrdinalInput, OrdinalOutput

__all__ = [
    "run_ordinal",
    "OrdinalInput",
    "OrdinalOutput",
    "ordinal",
    "ordinalize",
]
