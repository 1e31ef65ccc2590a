"""
Template component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Rules interface for template settings."""

    def get_missing_value(self) -> str:
        """Text substituted for missing parameters."""
        ...
