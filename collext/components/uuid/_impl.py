"""
UUID functional core.

RFC 4122 version 4 generation and validation.

Layout: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
- x: any hex digit
- 4: version nibble
- y: variant nibble, one of 8, 9, a, b
"""

from __future__ import annotations

import random as _random
import re
from dataclasses import dataclass, field

from .models import UuidValidationError
from .ports import RandomPort

UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
GROUP_LENGTHS = (8, 4, 4, 4, 12)
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

DEFAULT_RANDOM: RandomPort = _random


@dataclass(frozen=True)
class UuidConfig:
    """UUID configuration from rules."""

    variant_digits: tuple[int, ...] = field(default=(8, 9, 10, 11))


DEFAULT_CONFIG = UuidConfig()


def uuid(rng: RandomPort | None = None, config: UuidConfig = DEFAULT_CONFIG) -> str:
    """
    Generate a version 4 UUID string.

    Args:
        rng: Random source; defaults to the process-wide random module.
        config: Variant nibble candidates.

    Returns:
        A lowercase 36-character UUID, e.g. '9716498c-45df-47d2-8099-3f678446d776'
    """
    source = rng if rng is not None else DEFAULT_RANDOM
    variants = config.variant_digits
    chars = []

    for char in UUID_TEMPLATE:
        if char == "x":
            chars.append(format(source.randint(0, 15), "x"))
        elif char == "y":
            chars.append(format(variants[source.randint(0, len(variants) - 1)], "x"))
        else:
            chars.append(char)

    return "".join(chars)


def is_uuid(candidate: object) -> bool:
    """Check candidate is a version 4 UUID string (case-insensitive)."""
    return isinstance(candidate, str) and UUID_PATTERN.fullmatch(candidate) is not None


def diagnose_uuid(candidate: object) -> list[UuidValidationError]:
    """
    Explain why candidate is not a version 4 UUID.

    Returns an empty list exactly when is_uuid(candidate) is True.
    """
    if not isinstance(candidate, str):
        return [
            UuidValidationError(
                code="uuid_not_string",
                message=f"Expected a string, got {type(candidate).__name__}",
            )
        ]

    if len(candidate) != 36:
        return [
            UuidValidationError(
                code="uuid_bad_length",
                message=f"UUID must be 36 characters, got {len(candidate)}",
            )
        ]

    groups = candidate.split("-")
    lengths = tuple(len(group) for group in groups)
    if lengths != GROUP_LENGTHS or not all(set(group) <= HEX_DIGITS for group in groups):
        return [
            UuidValidationError(
                code="uuid_bad_layout",
                message="UUID must be hex digits grouped 8-4-4-4-12",
            )
        ]

    errors = []
    if groups[2][0] != "4":
        errors.append(
            UuidValidationError(
                code="uuid_bad_version",
                message=f"Version nibble must be 4, got {groups[2][0]}",
                field="version",
            )
        )
    if groups[3][0].lower() not in "89ab":
        errors.append(
            UuidValidationError(
                code="uuid_bad_variant",
                message=f"Variant nibble must be one of 8, 9, a, b, got {groups[3][0]}",
                field="variant",
            )
        )
    return errors
