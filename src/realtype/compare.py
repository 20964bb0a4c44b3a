"""Order-insensitive structural equality for checking results.

Comparison is directional: it inspects ``a`` and looks up the matching parts
of ``b``. Sequences are compared ignoring element order, and records only
check the keys present in ``a``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
from dataclasses import fields, is_dataclass
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace
from typing import Any

from realtype.classify import classify
from realtype.native import native_type
from realtype.rules import is_ordered_sequence
from realtype.values import UNDEFINED

# Types whose values of one native tag are totally ordered by ``<``.
_ORDERED_SCALARS = (int, float, str, Decimal, Fraction)


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    - Sequences: same length and pairwise equal after sorting both.
    - Records (mappings, dataclasses, namespaces): every key of ``a`` is
      equal under the same key of ``b``. Keys only in ``b`` are ignored.
    - Anything else: same native type and ``a == b``. No coercion, so
      ``True`` is not ``1`` and NaN is not equal to itself.

    Self-referential containers are supported: a pair of containers already
    under comparison is treated as equal.

    Example:
        deep_equal([1, 2, 3], [3, 2, 1])   # True
        deep_equal([], [])                 # True
        deep_equal({"a": 1}, {"a": 1, "b": 2})  # True
        deep_equal({"a": 1, "b": 2}, {"a": 1})  # False

    """
    return _equal(a, b, set())


def _equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if _is_composite(a) and _is_composite(b):
        pair = (id(a), id(b))
        if pair in seen:
            return True
        seen.add(pair)
        if is_ordered_sequence(a):
            return _sequences_equal(a, b, seen)
        return _records_equal(a, b, seen)
    return native_type(a) == native_type(b) and bool(a == b)


def _is_composite(value: Any) -> bool:
    return value is not None and native_type(value) == "object"


def _sequences_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if not is_ordered_sequence(b) or len(a) != len(b):
        return False
    return all(
        _equal(x, y, seen) for x, y in zip(_sorted(a), _sorted(b), strict=True)
    )


def _records_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    a_fields = _fields(a)
    if a_fields is None:
        # Sets, dates, patterns, futures: opaque, compare as values.
        return type(a) is type(b) and bool(a == b)
    b_fields = _fields(b) or {}
    return all(
        _equal(value, b_fields.get(key, UNDEFINED), seen)
        for key, value in a_fields.items()
    )


def _fields(value: Any) -> Mapping[Any, Any] | None:
    """Get the key/value view of a record, or None if it is not one."""
    if isinstance(value, Mapping):
        return value
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in fields(value)}
    if isinstance(value, SimpleNamespace):
        return vars(value)
    return None


# =============================================================================
# Sorting: grouped by native type, natural order for scalars, canonical
# string order for everything else
# =============================================================================


def _sorted(items: Iterable[Any]) -> list[Any]:
    groups: dict[str, list[Any]] = {}
    for item in items:
        groups.setdefault(native_type(item), []).append(item)

    result: list[Any] = []
    for tag in sorted(groups):
        result.extend(_sorted_group(groups[tag]))
    return result


def _sorted_group(group: list[Any]) -> list[Any]:
    if all(_is_ordered_scalar(v) for v in group):
        try:
            return sorted(group)
        except TypeError:
            pass
    return sorted(group, key=_canonical_key)


def _is_ordered_scalar(value: Any) -> bool:
    return isinstance(value, _ORDERED_SCALARS) and classify(value) != "NaN"


def _canonical_key(value: Any, active: frozenset[int] = frozenset()) -> str:
    """Serialize a value to a string that ignores sequence and key order.

    ``active`` holds the ids of the containers being serialized, so cycles
    end in a ``...`` marker.
    """
    tag = native_type(value)
    if id(value) in active:
        return f"{tag}:..."
    inner = active | {id(value)}

    if is_ordered_sequence(value) or isinstance(value, AbstractSet):
        parts = sorted(_canonical_key(item, inner) for item in value)
        brackets = "[]" if is_ordered_sequence(value) else "{}"
        return f"{tag}:{brackets[0]}{','.join(parts)}{brackets[1]}"

    if (record := _fields(value)) is not None:
        parts = sorted(
            f"{_canonical_key(k, inner)}={_canonical_key(v, inner)}"
            for k, v in record.items()
        )
        return f"{tag}:{type(value).__name__}({','.join(parts)})"

    return f"{tag}:{value!r}"
