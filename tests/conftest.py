"""Shared fixtures: one value per refined type, with its expected tags."""

from __future__ import annotations

import datetime
import re
from collections import OrderedDict
from concurrent.futures import Future
from typing import Any

import pytest

from realtype import UNDEFINED, BigInt, Symbol

# (value, native type, refined type)
KNOWN_VALUES: list[tuple[Any, str, str]] = [
    (42, "number", "number"),
    (float("nan"), "number", "NaN"),
    (float("inf"), "number", "Infinity"),
    ("string", "string", "string"),
    (False, "boolean", "boolean"),
    (BigInt(12), "bigint", "bigint"),
    (Symbol("a"), "symbol", "symbol"),
    (UNDEFINED, "undefined", "undefined"),
    (None, "object", "null"),
    (re.compile(r"[a-zA-Z]"), "object", "regexp"),
    ({1: "a", 2: "b"}, "object", "object"),
    ([1, 2, 3], "object", "array"),
    (lambda: 1, "function", "function"),
    (datetime.datetime(2024, 1, 2, 3, 4, 5), "object", "date"),
    (OrderedDict(), "object", "map"),
    ({1, 1, 1, 2, 3}, "object", "set"),
    (Future(), "object", "promise"),
]


@pytest.fixture
def known_values() -> list[Any]:
    """One value of every built-in refined type."""
    return [value for value, _, _ in KNOWN_VALUES]


@pytest.fixture
def known_native_types() -> list[str]:
    return [native for _, native, _ in KNOWN_VALUES]


@pytest.fixture
def known_real_types() -> list[str]:
    return [real for _, _, real in KNOWN_VALUES]
