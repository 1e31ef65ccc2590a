"""
collext - Pure utility functions for records and sequences.

Deep non-mutating merge, upsert-by-match, template formatting, ordinal
suffixes, version 4 UUIDs and dotted-path pluck.

Usage:
    >>> from collext import format, ordinal, pluck
    >>> format("Other {} are {}", "people", "good plumbers")
    'Other people are good plumbers'
    >>> ordinal(142)
    'nd'
    >>> pluck([{"p": {"c": 1}}, {"p": {"c": 2}}], "p.c")
    [1, 2]
"""

from collext.components.merge import immutable_merge
from collext.components.ordinal import ordinal, ordinalize
from collext.components.pluck import pluck
from collext.components.template import format, format_named, format_positional
from collext.components.upsert import upsert
from collext.components.uuid import RandomPort, is_uuid, uuid
from collext.rules import Rules, load_rules
from collext.shell import Chain, Extensions, configure_logging, create_extensions

__version__ = "0.1.0"

__all__ = [
    # Operations
    "immutable_merge",
    "upsert",
    "format",
    "format_positional",
    "format_named",
    "ordinal",
    "ordinalize",
    "uuid",
    "is_uuid",
    "pluck",
    # Facade
    "Chain",
    "Extensions",
    "create_extensions",
    "configure_logging",
    # Configuration
    "Rules",
    "load_rules",
    # Ports
    "RandomPort",
]
