"""
Pluck component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Rules interface for pluck settings."""

    def get_path_separator(self) -> str:
        """Separator between keys of a nested path."""
        ...
