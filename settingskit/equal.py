"""Equality rules used when comparing setting values."""

from __future__ import annotations

from typing import Any

_EMPTY = object()


class AnyValue:
    """A type-erased holder whose contents cannot be compared.

    Two holders are only considered equal when both are empty.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = value

    @property
    def has_value(self) -> bool:
        return self._value is not _EMPTY

    @property
    def value(self) -> Any:
        if not self.has_value:
            raise ValueError("AnyValue is empty")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyValue):
            return NotImplemented
        return not self.has_value and not other.has_value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self.has_value:
            return "AnyValue()"
        return f"AnyValue({self._value!r})"


def is_equal(lhs: Any, rhs: Any) -> bool:
    """Compare two setting values using the library's equality rules."""
    if isinstance(lhs, AnyValue) and isinstance(rhs, AnyValue):
        return lhs == rhs

    if isinstance(lhs, tuple) and isinstance(rhs, tuple):
        return len(lhs) == len(rhs) and all(
            is_equal(left, right) for left, right in zip(lhs, rhs)
        )

    if isinstance(lhs, dict) and isinstance(rhs, dict):
        if len(lhs) != len(rhs):
            return False
        for key, value in lhs.items():
            if key not in rhs:
                return False
            if not is_equal(value, rhs[key]):
                return False
        return True

    if isinstance(lhs, list) and isinstance(rhs, list):
        if len(lhs) != len(rhs):
            return False
        # Sequences of opaque values are compared by length only.
        if all(isinstance(item, AnyValue) for item in (*lhs, *rhs)):
            return True
        return all(is_equal(left, right) for left, right in zip(lhs, rhs))

    return lhs == rhs