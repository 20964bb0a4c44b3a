"""Refined type classification of single values and sequences."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable
from decimal import Decimal
from numbers import Complex, Rational, Real
from typing import Any

from realtype.native import native_type
from realtype.rules import TypeRules


def _numeric_type(value: Any) -> str:
    # Decimal is not registered as Real, and float() on sNaN raises.
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        return "number" if value.is_finite() else "Infinity"
    # Ints and fractions are always finite; float() could overflow on them.
    if isinstance(value, Rational):
        return "number"
    if isinstance(value, Real):
        if math.isnan(value):
            return "NaN"
        return "number" if math.isfinite(value) else "Infinity"
    if isinstance(value, Complex):
        if cmath.isnan(value):
            return "NaN"
        return "number" if cmath.isfinite(value) else "Infinity"
    return "number"


def classify(value: Any) -> str:
    """Get the refined type label of a value.

    Example:
        native_type(datetime.date.today())  # 'object'
        classify(datetime.date.today())     # 'date'
        native_type(float("nan"))           # 'number'
        classify(float("nan"))              # 'NaN'

    """
    native = native_type(value)
    if native == "number":
        return _numeric_type(value)
    if native == "object":
        for rule in TypeRules.rules():
            if rule.matches(value):
                return rule.label
        return "object"
    return native


def classify_all(values: Iterable[Any]) -> list[str]:
    """Get the refined type label of every item, in order."""
    return [classify(value) for value in values]
