"""
Template component - String interpolation with `{}` and `{name}` markers.

Shell Layer - builds config from rules and reports unresolved markers.

Invariants:
- I1: every marker is replaced (by a value or the missing value)
- I2: missing parameters never raise
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_CONFIG,
    TemplateConfig,
    find_markers,
    format_named,
    format_positional,
)
from .models import FormatNamedInput, FormatOutput, FormatPositionalInput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> TemplateConfig:
    """Build template config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG
    return TemplateConfig(missing_value=rules.get_missing_value())


def run_format_positional(
    inp: FormatPositionalInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """Fill markers in order from inp.values."""
    config = build_config(rules)
    markers = find_markers(inp.template)
    text = format_positional(inp.template, *inp.values, config=config)

    # Marker i reads values[i]; anything past the end or None is missing
    missing = tuple(
        name if name else f"#{index}"
        for index, name in enumerate(markers)
        if index >= len(inp.values) or inp.values[index] is None
    )

    return FormatOutput(text=text, markers=len(markers), missing=missing)


def run_format_named(
    inp: FormatNamedInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """Fill `{name}` markers from inp.params."""
    config = build_config(rules)
    markers = find_markers(inp.template)
    text = format_named(inp.template, inp.params, config)

    missing = tuple(dict.fromkeys(name for name in markers if inp.params.get(name) is None))

    return FormatOutput(text=text, markers=len(markers), missing=missing)


def run_format(
    inp: FormatPositionalInput | FormatNamedInput,
    *,
    rules: RulesPort | None = None,
) -> FormatOutput:
    """
    Main entry point for the template component.

    Dispatches on the input type.
    """
    if isinstance(inp, FormatNamedInput):
        return run_format_named(inp, rules=rules)
    elif isinstance(inp, FormatPositionalInput):
        return run_format_positional(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
