"""
Tests for the Extensions facade, chaining and bootstrap.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

import collext
from collext.rules import Rules
from collext.shell import (
    RULES_ENV_VAR,
    Chain,
    Extensions,
    configure_logging,
    create_extensions,
    resolve_rules,
)


class TestExtensions:
    """Every operation is reachable through the facade."""

    def test_operations(self, ext: Extensions) -> None:
        assert ext.immutable_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
        assert ext.upsert([{"id": 1}], {"id": 1}, {"id": 1, "v": 2}) == [{"id": 1, "v": 2}]
        assert ext.format("Other {} are {}", "people", "good plumbers") == (
            "Other people are good plumbers"
        )
        assert ext.format_positional("{}-{}", 1, 2) == "1-2"
        assert ext.format_named("{a}", {"a": "x"}) == "x"
        assert ext.ordinal(142) == "nd"
        assert ext.ordinalize(3) == "3rd"
        assert ext.is_uuid(ext.uuid())
        assert ext.pluck([{"p": {"c": 1}}], "p.c") == [1]

    def test_rules_apply(self, rng: random.Random) -> None:
        rules = Rules.model_validate(
            {
                "template": {"missing_value": "~"},
                "pluck": {"path_separator": ":"},
                "uuid": {"variant_digits": [11]},
            }
        )
        ext = Extensions(rules=rules, rng=rng)

        assert ext.format("{a}", {}) == "~"
        assert ext.pluck([{"a": {"b": 1}}], "a:b") == [1]
        assert ext.uuid()[19] == "b"

    def test_seeded_uuids_repeat(self) -> None:
        first = Extensions(rng=random.Random(3)).uuid()
        second = Extensions(rng=random.Random(3)).uuid()
        assert first == second

    def test_default_rules(self) -> None:
        assert Extensions().rules == Rules()


class TestChain:
    """Test chained calls."""

    def test_chain_upsert_then_pluck(self, ext: Extensions) -> None:
        rows = [{"id": 1, "tags": {"main": "a"}}, {"id": 2, "tags": {"main": "c"}}]
        result = (
            ext.chain(rows)
            .upsert({"id": 1}, {"id": 1, "tags": {"main": "b"}})
            .pluck("tags.main")
            .value()
        )

        assert result == ["c", "b"]
        assert rows[0]["tags"]["main"] == "a"

    def test_chain_merge_and_format(self, ext: Extensions) -> None:
        params = ext.chain({"cat": "books"}).immutable_merge({"isbn": "034038204X"}).value()
        text = ext.chain("/categ/{cat}/{isbn}").format(params).value()

        assert text == "/categ/books/034038204X"

    def test_chain_format_variants(self, ext: Extensions) -> None:
        assert ext.chain("{}{}").format_positional("a", "b").value() == "ab"
        assert ext.chain("{x}").format_named({"x": 1}).value() == "1"

    def test_chain_ordinal(self, ext: Extensions) -> None:
        assert ext.chain(22).ordinal().value() == "nd"
        assert ext.chain(22).ordinalize().value() == "22nd"

    def test_chain_is_uuid(self, ext: Extensions) -> None:
        assert ext.chain(ext.uuid()).is_uuid().value() is True
        assert ext.chain("not-a-uuid").is_uuid().value() is False

    def test_chain_is_immutable(self, ext: Extensions) -> None:
        start = ext.chain([{"a": 1}])
        step = start.pluck("a")

        assert isinstance(step, Chain)
        assert step is not start
        assert start.value() == [{"a": 1}]

    def test_unknown_operation(self, ext: Extensions) -> None:
        with pytest.raises(AttributeError):
            ext.chain(1).shuffle()  # type: ignore[attr-defined]

    def test_repr(self, ext: Extensions) -> None:
        assert repr(ext.chain([1])) == "Chain([1])"


class TestBootstrap:
    """Test rules resolution and facade creation."""

    def test_explicit_rules_win(self, rules_path: Path) -> None:
        rules = Rules.model_validate({"template": {"missing_value": "!"}})
        assert resolve_rules(rules, rules_path) is rules

    def test_rules_path(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("pluck:\n  path_separator: '>'\n")

        ext = create_extensions(rules_path=path)
        assert ext.pluck([{"a": {"b": 1}}], "a>b") == [1]

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("template:\n  missing_value: '?'\n")
        monkeypatch.setenv(RULES_ENV_VAR, str(path))

        assert resolve_rules().get_missing_value() == "?"

    def test_defaults_without_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(RULES_ENV_VAR, raising=False)
        assert resolve_rules() == Rules()

    def test_missing_rules_file_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            create_extensions(rules_path=tmp_path / "missing.yaml")

    def test_creation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="collext.shell.bootstrap"):
            create_extensions(rules=Rules())

        assert "Creating extensions" in caplog.text

    def test_configure_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(Rules.model_validate({"logging": {"level": "INFO"}}))

        assert calls[0]["level"] == logging.INFO


class TestPublicSurface:
    """The package root exports every operation."""

    def test_exports(self) -> None:
        for name in (
            "immutable_merge",
            "upsert",
            "format",
            "format_positional",
            "format_named",
            "ordinal",
            "uuid",
            "is_uuid",
            "pluck",
            "create_extensions",
        ):
            assert callable(getattr(collext, name))

    def test_documented_examples(self) -> None:
        assert collext.format("Other {} are {}", "people", "good plumbers") == (
            "Other people are good plumbers"
        )
        assert collext.format("/categ/{cat}/{isbn}", {"isbn": "034038204X"}) == "/categ//034038204X"
        assert collext.format("message without params") == "message without params"
        assert collext.pluck([{"a": 1}, {"a": 2}], "a") == [1, 2]
        assert collext.is_uuid("not-a-uuid") is False
