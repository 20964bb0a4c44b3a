"""Ordered refinement rules for object-category values.

Built-in rules recover the distinctions the native ``object`` tag collapses
(arrays, null, dates, maps, sets, promises, regexps). Custom rules can be
registered to extend the label set; they are consulted after the built-ins
and before the ``object`` fallback.
"""

from __future__ import annotations

import datetime
import logging
import re
from collections.abc import Awaitable, Callable, Mapping, Sequence
from collections.abc import Set as AbstractSet
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, ClassVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeRule:
    """A predicate and the refined label it assigns."""

    label: str
    predicate: Callable[[Any], bool]

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))


def is_ordered_sequence(value: Any) -> bool:
    """Return True for array-like values (lists, tuples, ranges, deques...)."""
    return isinstance(value, Sequence) and not isinstance(
        value,
        (str, bytes, bytearray, memoryview),
    )


_BUILTIN_RULES: tuple[TypeRule, ...] = (
    TypeRule("array", is_ordered_sequence),
    TypeRule("null", lambda v: v is None),
    TypeRule("date", lambda v: isinstance(v, datetime.date)),
    # A plain dict is a record; other mappings are associative containers.
    TypeRule("map", lambda v: isinstance(v, Mapping) and type(v) is not dict),
    TypeRule("set", lambda v: isinstance(v, AbstractSet)),
    TypeRule("promise", lambda v: isinstance(v, (Awaitable, Future))),
    TypeRule("regexp", lambda v: isinstance(v, re.Pattern)),
)

# Every label the classifier can produce without custom rules.
REAL_TYPES: frozenset[str] = frozenset(
    {rule.label for rule in _BUILTIN_RULES}
    | {
        "number",
        "NaN",
        "Infinity",
        "object",
        "boolean",
        "string",
        "undefined",
        "symbol",
        "function",
        "bigint",
    },
)


class TypeRules:
    """Registry of refinement rules for object-category values.

    Usage:
        TypeRules.register("path", lambda v: isinstance(v, PurePath))
        classify(Path("."))  # 'path'
    """

    _custom: ClassVar[dict[str, TypeRule]] = {}

    @classmethod
    def register(cls, label: str, predicate: Callable[[Any], bool]) -> TypeRule:
        """Register a custom rule.

        Args:
            label: The refined label assigned to matching values
            predicate: Called with an object-category value, truthy on match

        Returns:
            The registered rule (the existing one if the same pair is
            registered twice).

        Raises:
            ValueError: If the label is empty, built-in, or already
                registered with a different predicate.
            TypeError: If the predicate is not callable.

        """
        if not label:
            msg = "Rule label must be a non-empty string"
            raise ValueError(msg)
        if not callable(predicate):
            msg = f"Rule predicate for '{label}' must be callable, got {predicate!r}"
            raise TypeError(msg)
        if label in REAL_TYPES:
            msg = f"Label '{label}' is built in and cannot be redefined."
            raise ValueError(msg)

        if existing := cls._custom.get(label):
            if existing.predicate is predicate:
                return existing
            msg = (
                f"Label '{label}' already registered to {existing.predicate!r}. "
                "Choose a different label."
            )
            raise ValueError(msg)

        rule = TypeRule(label, predicate)
        cls._custom[label] = rule
        logger.debug(f"Registered type rule '{label}'")
        return rule

    @classmethod
    def unregister(cls, label: str) -> bool:
        """Remove a custom rule.

        Returns:
            True if the label was registered and removed, False otherwise.

        """
        if cls._custom.pop(label, None) is None:
            return False
        logger.debug(f"Unregistered type rule '{label}'")
        return True

    @classmethod
    def rules(cls) -> tuple[TypeRule, ...]:
        """All rules in evaluation order, built-ins first."""
        return _BUILTIN_RULES + tuple(cls._custom.values())

    @classmethod
    def labels(cls) -> frozenset[str]:
        """Every label the classifier can currently return."""
        return REAL_TYPES.union(cls._custom)

    @classmethod
    def clear(cls) -> None:
        """Drop all custom rules; built-ins stay."""
        cls._custom.clear()
        logger.debug("Cleared custom type rules")
