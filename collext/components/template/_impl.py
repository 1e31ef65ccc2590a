"""
Template functional core.

Fills `{}` and `{name}` markers in a template string.

Marker grammar: "{", an optional letter/underscore/$, then any number of
letters, digits, underscores or $, then "}". Markers starting with a digit
are left as literal text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

MARKER_PATTERN = re.compile(r"\{(?:[a-zA-Z_$][0-9a-zA-Z_$]*)?\}")


@dataclass(frozen=True)
class TemplateConfig:
    """Template configuration from rules."""

    missing_value: str = ""


DEFAULT_CONFIG = TemplateConfig()


def find_markers(template: str) -> list[str]:
    """Return marker names in template order ("" for empty markers)."""
    _require_str(template)
    return [m.group(0)[1:-1] for m in MARKER_PATTERN.finditer(template)]


def render_value(value: Any, config: TemplateConfig = DEFAULT_CONFIG) -> str:
    if value is None:
        return config.missing_value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _require_str(template: Any) -> None:
    if not isinstance(template, str):
        raise TypeError(f"template must be a str, got {type(template).__name__}")


def format_positional(
    template: str,
    *values: Any,
    config: TemplateConfig = DEFAULT_CONFIG,
) -> str:
    """
    Replace markers left to right with successive values.

    Marker names are ignored: every marker consumes the next value.
    Markers past the last value get the missing value.

    Usage:
        >>> format_positional("Other {} are {}", "people", "good plumbers")
        'Other people are good plumbers'
    """
    _require_str(template)
    remaining: Iterator[Any] = iter(values)

    def replace(_: re.Match[str]) -> str:
        return render_value(next(remaining, None), config)

    return MARKER_PATTERN.sub(replace, template)


def format_named(
    template: str,
    params: Mapping[str, Any],
    config: TemplateConfig = DEFAULT_CONFIG,
) -> str:
    """
    Replace each `{name}` marker with params[name].

    Usage:
        >>> format_named("/categ/{cat}/{isbn}", {"isbn": "034038204X"})
        '/categ//034038204X'
    """
    _require_str(template)

    def replace(match: re.Match[str]) -> str:
        return render_value(params.get(match.group(0)[1:-1]), config)

    return MARKER_PATTERN.sub(replace, template)


def format(
    template: str,
    *params: Any,
    config: TemplateConfig = DEFAULT_CONFIG,
) -> str:
    """
    Format template with named or positional parameters.

    A mapping as the first parameter selects named mode; anything else is
    positional.

    Usage:
        >>> format("/{categ}/{isbn}", "books", "034038204X")
        '/books/034038204X'
        >>> format("/{categ}/{isbn}", {"categ": "books", "isbn": "034038204X"})
        '/books/034038204X'
    """
    if params and isinstance(params[0], Mapping):
        return format_named(template, params[0], config)
    return format_positional(template, *params, config=config)
