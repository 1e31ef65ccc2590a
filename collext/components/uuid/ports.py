"""
UUID component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class RandomPort(Protocol):
    """
    Source of random integers.

    random.Random instances and the random module itself satisfy this.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


class RulesPort(Protocol):
    """Rules interface for UUID settings."""

    def get_variant_digits(self) -> tuple[int, ...]:
        """Candidate values (8..11) for the variant nibble."""
        ...
