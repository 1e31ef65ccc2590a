"""
Pluck component - Property extraction with dotted path support.
"""

from ._impl import DEFAULT_CONFIG, PluckConfig, pluck, split_path
from .component import build_config, run_pluck
from .models import PluckInput, PluckOutput
from .ports import RulesPort

__all__ = [
    "run_pluck",
    "build_config",
    "PluckInput",
    "PluckOutput",
    "RulesPort",
    "DEFAULT_CONFIG",
    "PluckConfig",
    "pluck",
    "split_path",
]
