"""Native (coarse) type tags for Python values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from numbers import Number
from typing import Any

from realtype.values import UNDEFINED, BigInt, Symbol

# Ordered: first match wins. bool and BigInt are ints, so they come first.
_NATIVE_RULES: tuple[tuple[Callable[[Any], bool], str], ...] = (
    (lambda v: v is UNDEFINED, "undefined"),
    (lambda v: isinstance(v, bool), "boolean"),
    (lambda v: isinstance(v, BigInt), "bigint"),
    (lambda v: isinstance(v, Number), "number"),
    (lambda v: isinstance(v, str), "string"),
    (lambda v: isinstance(v, Symbol), "symbol"),
    (callable, "function"),
)

NATIVE_TYPES: frozenset[str] = frozenset(
    {tag for _, tag in _NATIVE_RULES} | {"object"},
)


def native_type(value: Any) -> str:
    """Get the native type tag of a value.

    Everything that is not a primitive, a symbol or a callable is an
    ``object``, ``None`` included.
    """
    for matches, tag in _NATIVE_RULES:
        if matches(value):
            return tag
    return "object"


def native_types(values: Iterable[Any]) -> list[str]:
    """Get the native type tag of every item, in order."""
    return [native_type(value) for value in values]
