"""Validity guards shared by every vector operation."""

from __future__ import annotations

from typing import Any

from vectorkit.core.errors import InvalidVectorError, LengthMismatchError
from vectorkit.core.vector import Vector


def assert_valid(vec: Any) -> None:
    """Raise InvalidVectorError unless ``vec`` is a live Vector."""
    if vec is None:
        raise InvalidVectorError("Attempting to manipulate NULL vector")
    if not isinstance(vec, Vector):
        raise InvalidVectorError(f"Expected a Vector, got {type(vec).__name__}")
    if vec.released:
        raise InvalidVectorError("Attempting to manipulate a released vector")


def assert_same_length(a: Vector, b: Vector, operation: str = "add") -> int:
    """Validate both operands and return their common length."""
    assert_valid(a)
    assert_valid(b)
    left, right = len(a), len(b)
    if left != right:
        raise LengthMismatchError(left, right, operation)
    return left


def length(vec: Vector) -> int:
    assert_valid(vec)
    return len(vec)


def release(vec: Vector) -> None:
    """Release ``vec``; releasing twice raises InvalidVectorError."""
    assert_valid(vec)
    vec.release()
