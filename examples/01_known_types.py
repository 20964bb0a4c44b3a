"""
Known Types Example
===================

Classifies one value of every built-in refined type and demonstrates:
- native_type vs classify
- Collection queries: homogeneity, uniqueness, frequency tables
- Registering a custom rule
- Reporting checks through CheckSuite and logging
"""

import datetime
import logging
import math
import re
from collections import OrderedDict
from concurrent.futures import Future
from pathlib import Path, PurePath

from realtype import (
    UNDEFINED,
    BigInt,
    Boxed,
    CheckSuite,
    Symbol,
    TypeRules,
    all_same_native_type,
    all_unique_refined_types,
    classify,
    count_by_refined_type,
    native_type,
)


# ============================================================================
# Sample values
# ============================================================================

KNOWN_VALUES = [
    42,
    math.nan,
    math.inf,
    "string",
    False,
    BigInt(12),
    Symbol("a"),
    UNDEFINED,
    None,
    re.compile(r"[a-zA-Z]"),
    {1: "a", 2: "b"},
    [1, 2, 3],
    lambda: 1,
    datetime.datetime.now(),
    OrderedDict(),
    {1, 1, 1, 2, 3},
    Future(),
]


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print(f"{'value':<28} {'native':<10} refined")
    for value in KNOWN_VALUES:
        print(f"{value!r:<28.28} {native_type(value):<10} {classify(value)}")
    print()

    print(f"Counts: {count_by_refined_type([True, None, False, True, {}])}")
    print(f"Counts of nothing: {count_by_refined_type([])}")
    print()

    # Custom labels extend the taxonomy for plain objects
    TypeRules.register("path", lambda v: isinstance(v, PurePath))
    print(f"classify(Path('.')) = {classify(Path('.'))!r}")
    TypeRules.unregister("path")
    print()

    suite = CheckSuite("known types")

    suite.block("all_same_native_type")
    suite.check("All numbers", all_same_native_type([11, 12, 13]), True)
    suite.check("Boxed string", all_same_native_type(["11", Boxed("12"), "13"]), False)

    suite.block("all_unique_refined_types")
    suite.check("Known values", all_unique_refined_types(KNOWN_VALUES), True)
    suite.check("Two booleans", all_unique_refined_types([True, 123, False]), False)

    print()
    print(suite)


if __name__ == "__main__":
    main()
