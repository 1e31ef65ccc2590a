"""
Upsert component - Remove matching elements and append a replacement.
"""

from ._impl import upsert
from .component import run_upsert
from .models import UpsertInput, UpsertOutput

__all__ = [
    "run_upsert",
    "UpsertInput",
    "UpsertOutput",
    "upsert",
]
