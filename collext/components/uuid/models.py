"""
UUID component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Validation Errors ---


@dataclass(frozen=True)
class UuidValidationError:
    """UUID validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class GenerateUuidInput:
    """Input for generating UUIDs."""

    count: int = 1


@dataclass(frozen=True)
class ValidateUuidInput:
    """Input for validating a UUID candidate."""

    candidate: object


# --- Output Models ---


@dataclass(frozen=True)
class GenerateUuidOutput:
    """Output from generate operation."""

    uuids: tuple[str, ...]
    errors: tuple[UuidValidationError, ...] = ()
    success: bool = True


@dataclass(frozen=True)
class ValidateUuidOutput:
    """Output from validate operation."""

    is_valid: bool
    errors: tuple[UuidValidationError, ...] = ()
    success: bool = True
