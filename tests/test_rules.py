"""Tests for TypeRules - registry of refinement rules."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path, PurePath
from typing import Any

import pytest

from realtype import REAL_TYPES, TypeRule, TypeRules, classify, count_by_refined_type


def _is_path(value: Any) -> bool:
    return isinstance(value, PurePath)


@pytest.fixture(autouse=True)
def _clean_registry() -> Iterator[None]:
    TypeRules.clear()
    yield
    TypeRules.clear()


class TestBuiltinRules:
    """Test the built-in rule table."""

    def test_builtin_order(self) -> None:
        """Test that built-in rules are evaluated in priority order."""
        assert [rule.label for rule in TypeRules.rules()] == [
            "array",
            "null",
            "date",
            "map",
            "set",
            "promise",
            "regexp",
        ]

    def test_labels_without_custom_rules(self) -> None:
        assert TypeRules.labels() == REAL_TYPES

    def test_rule_matches(self) -> None:
        rule = TypeRule("path", _is_path)
        assert rule.matches(Path("a"))
        assert not rule.matches("a")


class TestRegister:
    """Test the TypeRules.register() API."""

    def test_register_custom_rule(self) -> None:
        """Test that a custom rule refines plain objects."""
        assert classify(Path("setup.cfg")) == "object"

        rule = TypeRules.register("path", _is_path)

        assert rule == TypeRule("path", _is_path)
        assert classify(Path("setup.cfg")) == "path"
        assert "path" in TypeRules.labels()
        assert TypeRules.rules()[-1] is rule

    def test_custom_rules_only_see_objects(self) -> None:
        """Test that primitives keep their label even if a rule matches."""
        TypeRules.register("text", lambda v: isinstance(v, str))
        assert classify("abc") == "string"

    def test_builtin_rules_take_priority(self) -> None:
        """Test that custom rules run after the built-in ones."""
        TypeRules.register("pair", lambda v: isinstance(v, tuple))
        assert classify((1, 2)) == "array"

    def test_rules_in_registration_order(self) -> None:
        TypeRules.register("first", _is_path)
        TypeRules.register("second", _is_path)
        assert classify(Path("x")) == "first"

    def test_counts_use_custom_labels(self) -> None:
        TypeRules.register("path", _is_path)
        assert count_by_refined_type([Path("a"), Path("b"), {}]) == [
            ("object", 1),
            ("path", 2),
        ]

    def test_register_same_pair_twice(self) -> None:
        """Test that registering the same label and predicate is a no-op."""
        first = TypeRules.register("path", _is_path)
        second = TypeRules.register("path", _is_path)
        assert first is second
        assert len(TypeRules.rules()) == len(set(TypeRules.rules()))

    def test_conflicting_predicate(self) -> None:
        TypeRules.register("path", _is_path)
        with pytest.raises(ValueError, match="Label 'path' already registered"):
            TypeRules.register("path", lambda v: isinstance(v, Path))

    @pytest.mark.parametrize("label", sorted(REAL_TYPES))
    def test_builtin_label_rejected(self, label: str) -> None:
        with pytest.raises(ValueError, match="is built in"):
            TypeRules.register(label, _is_path)

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            TypeRules.register("", _is_path)

    def test_predicate_must_be_callable(self) -> None:
        with pytest.raises(TypeError, match="must be callable"):
            TypeRules.register("path", "not callable")  # type: ignore[arg-type]

    def test_register_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="realtype.rules")
        TypeRules.register("path", _is_path)
        assert "Registered type rule 'path'" in caplog.text


class TestUnregisterAndClear:
    """Test removing custom rules."""

    def test_unregister(self) -> None:
        TypeRules.register("path", _is_path)
        assert TypeRules.unregister("path")
        assert classify(Path("x")) == "object"

    def test_unregister_unknown(self) -> None:
        assert not TypeRules.unregister("missing")

    def test_clear_keeps_builtins(self) -> None:
        TypeRules.register("path", _is_path)
        TypeRules.clear()
        assert TypeRules.labels() == REAL_TYPES
        assert classify([1]) == "array"
