"""
Template component - Positional and named string formatting.
"""

from ._impl import (
    DEFAULT_CONFIG,
    MARKER_PATTERN,
    TemplateConfig,
    find_markers,
    format,
    format_named,
    format_positional,
)
from .component import (
    build_config,
    run_format,
    run_format_named,
    run_format_positional,
)
from .models import FormatNamedInput, FormatOutput, FormatPositionalInput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run_format",
    "run_format_named",
    "run_format_positional",
    "build_config",
    # Models
    "FormatNamedInput",
    "FormatPositionalInput",
    "FormatOutput",
    # Ports
    "RulesPort",
    # Functional core
    "DEFAULT_CONFIG",
    "MARKER_PATTERN",
    "TemplateConfig",
    "find_markers",
    "format",
    "format_named",
    "format_positional",
]
