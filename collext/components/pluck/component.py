"""
Pluck component - Nested property extraction.

Shell Layer - builds config from rules and counts unresolved entries.
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, PluckConfig, pluck, split_path
from .models import PluckInput, PluckOutput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> PluckConfig:
    """Build pluck config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG
    return PluckConfig(path_separator=rules.get_path_separator())


def run_pluck(
    inp: PluckInput,
    *,
    rules: RulesPort | None = None,
) -> PluckOutput:
    """
    Pluck inp.path from every element of inp.sequence.

    Returns:
        PluckOutput with the values, the resolved keys and how many
        entries came back as None.
    """
    config = build_config(rules)
    values = pluck(inp.sequence, inp.path, config)

    return PluckOutput(
        values=values,
        keys=tuple(str(key) for key in split_path(inp.path, config)),
        missing=sum(1 for value in values if value is None),
    )
