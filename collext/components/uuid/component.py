"""
UUID component - Version 4 UUID generation and validation.

Shell Layer - builds config from rules and reports validation errors.

Invariants:
- I1: every generated UUID passes is_uuid
- I2: validation errors are empty iff the candidate is valid
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, UuidConfig, diagnose_uuid, uuid
from .models import (
    GenerateUuidInput,
    GenerateUuidOutput,
    UuidValidationError,
    ValidateUuidInput,
    ValidateUuidOutput,
)
from .ports import RandomPort, RulesPort


def build_config(rules: RulesPort | None) -> UuidConfig:
    """Build UUID config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG
    return UuidConfig(variant_digits=rules.get_variant_digits())


def run_generate(
    inp: GenerateUuidInput,
    *,
    rng: RandomPort | None = None,
    rules: RulesPort | None = None,
) -> GenerateUuidOutput:
    """Generate inp.count UUIDs."""
    if inp.count < 0:
        return GenerateUuidOutput(
            uuids=(),
            errors=(
                UuidValidationError(
                    code="count_negative",
                    message=f"count must be >= 0, got {inp.count}",
                    field="count",
                ),
            ),
            success=False,
        )

    config = build_config(rules)
    return GenerateUuidOutput(
        uuids=tuple(uuid(rng, config) for _ in range(inp.count)),
    )


def run_validate(inp: ValidateUuidInput) -> ValidateUuidOutput:
    """Validate inp.candidate, explaining any failure."""
    errors = tuple(diagnose_uuid(inp.candidate))
    return ValidateUuidOutput(is_valid=not errors, errors=errors)


def run(
    inp: GenerateUuidInput | ValidateUuidInput,
    *,
    rng: RandomPort | None = None,
    rules: RulesPort | None = None,
) -> GenerateUuidOutput | ValidateUuidOutput:
    """
    Main entry point for the UUID component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GenerateUuidInput):
        return run_generate(inp, rng=rng, rules=rules)
    elif isinstance(inp, ValidateUuidInput):
        return run_validate(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
