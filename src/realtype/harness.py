"""Named expected-vs-actual checks grouped into blocks.

Outcomes are reported through ``logging``: block headers and ``[OK]`` lines
at INFO, ``[FAIL]`` lines at ERROR, and the expected/actual values of a
failure at DEBUG. The caller decides where those records go.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from realtype.compare import deep_equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CheckResult:
    """Outcome of a single check."""

    name: str
    actual: Any
    expected: Any
    passed: bool
    block: str | None = None

    def __bool__(self) -> bool:
        return self.passed

    def __str__(self) -> str:
        if self.passed:
            return f"[OK] {self.name}"
        return (
            f"[FAIL] {self.name}\n"
            f"  Expected: {self.expected!r}\n"
            f"  Actual:   {self.actual!r}"
        )


class CheckSuite:
    """Collects checks, optionally grouped into named blocks.

    Usage:
        suite = CheckSuite("real types")
        suite.block("classify")
        suite.check("Boolean", classify(True), "boolean")
        assert suite.passed
    """

    def __init__(
        self,
        name: str = "checks",
        *,
        comparator: Callable[[Any, Any], bool] = deep_equal,
    ) -> None:
        self.name = name
        self._comparator = comparator
        self._block: str | None = None
        self._results: list[CheckResult] = []

    def block(self, name: str) -> None:
        """Start a new block; following checks belong to it."""
        self._block = name
        logger.info(f"# {name}")

    def check(self, name: str, actual: Any, expected: Any) -> CheckResult:
        """Compare actual against expected and record the outcome."""
        result = CheckResult(
            name=name,
            actual=actual,
            expected=expected,
            passed=self._comparator(actual, expected),
            block=self._block,
        )
        self._results.append(result)

        if result.passed:
            logger.info(f"[OK] {name}")
        else:
            logger.error(f"[FAIL] {name}")
            logger.debug(f"Expected: {expected!r}")
            logger.debug(f"Actual: {actual!r}")
        return result

    @property
    def results(self) -> tuple[CheckResult, ...]:
        return tuple(self._results)

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        return tuple(r for r in self._results if not r.passed)

    @property
    def passed(self) -> bool:
        """Return True if no check has failed."""
        return not self.failures

    def by_block(self) -> dict[str | None, tuple[CheckResult, ...]]:
        """Group results by block name, in the order blocks were first seen."""
        grouped: dict[str | None, list[CheckResult]] = {}
        for result in self._results:
            grouped.setdefault(result.block, []).append(result)
        return {block: tuple(results) for block, results in grouped.items()}

    def __str__(self) -> str:
        failed = len(self.failures)
        summary = (
            f"CheckSuite {self.name}: "
            f"{len(self._results) - failed} passed, {failed} failed"
        )
        if not failed:
            return summary
        details = "\n  ".join(
            str(r).replace("\n", "\n  ") for r in self.failures
        )
        return f"{summary}\n  {details}"
