"""
Extensions facade - every operation bound to one configuration.

Replaces mixing functions into a shared host library: callers compose an
Extensions instance and call it directly, or wrap a value with chain().
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from collext.components import merge, ordinal, pluck, template, upsert
from collext.components import uuid as uuid_component
from collext.components.uuid import RandomPort
from collext.primitives import Matcher
from collext.rules import Rules


class Extensions:
    """
    Utility functions sharing one Rules configuration and random source.

    All methods are pure apart from uuid(), which draws from the random
    source.
    """

    def __init__(self, rules: Rules | None = None, rng: RandomPort | None = None) -> None:
        self._rules = rules if rules is not None else Rules()
        self._rng = rng
        self._template = template.build_config(self._rules)
        self._pluck = pluck.build_config(self._rules)
        self._uuid = uuid_component.build_config(self._rules)

    @property
    def rules(self) -> Rules:
        return self._rules

    def immutable_merge(
        self, src: Mapping[str, Any] | None, dest: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        return merge.immutable_merge(src, dest)

    def upsert(self, base: Iterable[Any], match: Matcher, replacement: Any) -> list[Any]:
        return upsert.upsert(base, match, replacement)

    def format(self, template_str: str, *params: Any) -> str:
        return template.format(template_str, *params, config=self._template)

    def format_positional(self, template_str: str, *values: Any) -> str:
        return template.format_positional(template_str, *values, config=self._template)

    def format_named(self, template_str: str, params: Mapping[str, Any]) -> str:
        return template.format_named(template_str, params, self._template)

    def ordinal(self, number: float) -> str:
        return ordinal.ordinal(number)

    def ordinalize(self, number: float) -> str:
        return ordinal.ordinalize(number)

    def uuid(self) -> str:
        return uuid_component.uuid(self._rng, self._uuid)

    def is_uuid(self, candidate: object) -> bool:
        return uuid_component.is_uuid(candidate)

    def pluck(self, sequence: Iterable[Any], path: Any) -> list[Any]:
        return pluck.pluck(sequence, path, self._pluck)

    def chain(self, value: Any) -> Chain:
        """Wrap value so operations can be chained."""
        return Chain(value, self)


class Chain:
    """
    Immutable wrapper feeding its value into Extensions operations.

    Usage:
        >>> ext = Extensions()
        >>> ext.chain([{"id": 1, "tags": {"main": "a"}}]).upsert(
        ...     {"id": 1}, {"id": 1, "tags": {"main": "b"}}
        ... ).pluck("tags.main").value()
        ['b']
    """

    __slots__ = ("_value", "_extensions")

    def __init__(self, value: Any, extensions: Extensions) -> None:
        self._value = value
        self._extensions = extensions

    def __repr__(self) -> str:
        return f"Chain({self._value!r})"

    def _next(self, value: Any) -> Chain:
        return Chain(value, self._extensions)

    def value(self) -> Any:
        """Unwrap the chained value."""
        return self._value

    def immutable_merge(self, dest: Mapping[str, Any] | None) -> Chain:
        return self._next(self._extensions.immutable_merge(self._value, dest))

    def upsert(self, match: Matcher, replacement: Any) -> Chain:
        return self._next(self._extensions.upsert(self._value, match, replacement))

    def format(self, *params: Any) -> Chain:
        return self._next(self._extensions.format(self._value, *params))

    def format_positional(self, *values: Any) -> Chain:
        return self._next(self._extensions.format_positional(self._value, *values))

    def format_named(self, params: Mapping[str, Any]) -> Chain:
        return self._next(self._extensions.format_named(self._value, params))

    def ordinal(self) -> Chain:
        return self._next(self._extensions.ordinal(self._value))

    def ordinalize(self) -> Chain:
        return self._next(self._extensions.ordinalize(self._value))

    def is_uuid(self) -> Chain:
        return self._next(self._extensions.is_uuid(self._value))

    def pluck(self, path: Any) -> Chain:
        return self._next(self._extensions.pluck(self._value, path))
