"""realtype - Refined runtime type classification for Python values."""

from realtype.classify import (
    classify,
    classify_all,
)
from realtype.compare import deep_equal
from realtype.harness import (
    CheckResult,
    CheckSuite,
)
from realtype.native import (
    NATIVE_TYPES,
    native_type,
    native_types,
)
from realtype.queries import (
    FrequencyTable,
    all_same_native_type,
    all_unique_refined_types,
    count_by_refined_type,
)
from realtype.rules import (
    REAL_TYPES,
    TypeRule,
    TypeRules,
)
from realtype.values import (
    UNDEFINED,
    BigInt,
    Boxed,
    Symbol,
)

__all__ = [
    "NATIVE_TYPES",
    "REAL_TYPES",
    "UNDEFINED",
    "BigInt",
    "Boxed",
    "CheckResult",
    "CheckSuite",
    "FrequencyTable",
    "Symbol",
    "TypeRule",
    "TypeRules",
    "all_same_native_type",
    "all_unique_refined_types",
    "classify",
    "classify_all",
    "count_by_refined_type",
    "deep_equal",
    "native_type",
    "native_types",
]
