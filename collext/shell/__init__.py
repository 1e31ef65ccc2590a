"""
Imperative shell - facade composition and logging setup.
"""

from collext.shell.bootstrap import (
    RULES_ENV_VAR,
    configure_logging,
    create_extensions,
    resolve_rules,
)
from collext.shell.facade import Chain, Extensions

__all__ = [
    "Chain",
    "Extensions",
    "RULES_ENV_VAR",
    "configure_logging",
    "create_extensions",
    "resolve_rules",
]
