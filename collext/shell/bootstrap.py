"""
Bootstrap - compose the Extensions facade from configuration.

Resolution order for rules:
1. Explicit Rules instance
2. Explicit rules file path
3. COLLEXT_RULES_PATH environment variable
4. Built-in defaults
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from collext.components.uuid import RandomPort
from collext.rules import Rules, load_rules
from collext.shell.facade import Extensions

logger = logging.getLogger(__name__)

RULES_ENV_VAR = "COLLEXT_RULES_PATH"


def resolve_rules(rules: Rules | None = None, rules_path: Path | None = None) -> Rules:
    """Pick the rules to use, loading from disk when a path is given."""
    if rules is not None:
        return rules

    if rules_path is None:
        env_path = os.environ.get(RULES_ENV_VAR)
        if env_path:
            rules_path = Path(env_path)

    if rules_path is None:
        logger.debug("No rules file configured, using defaults")
        return Rules()

    logger.info("Loading rules from %s", rules_path)
    return load_rules(rules_path)


def configure_logging(rules: Rules) -> None:
    """Apply the configured log level. For applications, not library code."""
    logging.basicConfig(
        level=getattr(logging, rules.logging.level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_extensions(
    rules: Rules | None = None,
    rng: RandomPort | None = None,
    *,
    rules_path: Path | None = None,
) -> Extensions:
    """Create an Extensions facade with optional configuration."""
    resolved = resolve_rules(rules, rules_path)
    logger.debug(
        "Creating extensions (separator=%r, missing_value=%r)",
        resolved.get_path_separator(),
        resolved.get_missing_value(),
    )
    return Extensions(rules=resolved, rng=rng)
