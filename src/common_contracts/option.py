"""
Explicit optional wrapper.

``None`` cannot tell "no value given" apart from "a value that may be
missing", so ``Option`` carries the second case. Passing ``None`` where an
``Option`` is expected means the container itself is absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from common_contracts.tiers import Tier

T = TypeVar("T")


@dataclass(frozen=True)
class Option(Generic[T]):
    """A value that is either present or empty."""

    _value: Optional[T] = None

    @classmethod
    def of(cls, value: T) -> "Option[T]":
        if value is None:
            raise Tier.REQUIRE.violation("Argument value was null")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> "Option[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "Option[T]":
        return cls()

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        if self._value is None:
            raise Tier.CHECK.violation("State object value was empty")
        return self._value

    def __repr__(self) -> str:
        if self._value is None:
            return "Option.empty()"
        return f"Option.of({self._value!r})"
