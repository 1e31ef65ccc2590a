"""
UUID component - RFC 4122 version 4 UUIDs.
"""

from ._impl import (
    DEFAULT_CONFIG,
    UUID_PATTERN,
    UuidConfig,
    diagnose_uuid,
    is_uuid,
    uuid,
)
from .component import build_config, run, run_generate, run_validate
from .models import (
    GenerateUuidInput,
    GenerateUuidOutput,
    UuidValidationError,
    ValidateUuidInput,
    ValidateUuidOutput,
)
from .ports import RandomPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_generate",
    "run_validate",
    "build_config",
    # Input models
    "GenerateUuidInput",
    "ValidateUuidInput",
    # Output models
    "GenerateUuidOutput",
    "ValidateUuidOutput",
    "UuidValidationError",
    # Ports
    "RandomPort",
    "RulesPort",
    # Functional core
    "DEFAULT_CONFIG",
    "UUID_PATTERN",
    "UuidConfig",
    "diagnose_uuid",
    "is_uuid",
    "uuid",
]
