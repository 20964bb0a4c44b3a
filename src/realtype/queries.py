"""Collection-level queries over native and refined type labels."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from realtype.classify import classify_all
from realtype.native import native_types

type FrequencyTable = list[tuple[str, int]]


def all_same_native_type(values: Iterable[Any]) -> bool:
    """Return True if every item has the native type of the first one.

    Uses the coarse tag, so ``[1, float("nan")]`` is homogeneous while
    ``["11", Boxed("12")]`` is not. Empty input is homogeneous.
    """
    tags = native_types(values)
    return all(tag == tags[0] for tag in tags)


def all_unique_refined_types(values: Iterable[Any]) -> bool:
    """Return True if no two items share a refined type label."""
    labels = classify_all(values)
    return len(labels) == len(set(labels))


def count_by_refined_type(values: Iterable[Any]) -> FrequencyTable | None:
    """Count items per refined type label.

    Returns:
        ``(label, count)`` pairs sorted by label, e.g.
        ``[("boolean", 3), ("null", 1)]``, or None for empty input.

    """
    labels = classify_all(values)
    if not labels:
        return None
    return sorted(Counter(labels).items())
