"""Value markers for type categories Python does not carry natively.

Python folds some categories into its own built-ins (there is no separate
"undefined" next to ``None``, and every ``int`` is already arbitrary
precision). These markers make those categories explicit so that they can be
told apart by the native and refined classifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class _Undefined:
    """Absent-binding sentinel, distinct from ``None``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class Symbol:
    """Unique symbolic token.

    Two symbols are never equal, even with the same description.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


class BigInt(int):
    """Integer explicitly marked as arbitrary precision."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{int(self)}n"


@dataclass(frozen=True)
class Boxed:
    """Primitive wrapped in an object: Boxed("12") is an object, not a str."""

    value: Any

    def __repr__(self) -> str:
        return f"Boxed({self.value!r})"
