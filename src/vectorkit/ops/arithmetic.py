"""Element-wise arithmetic. Every operation returns a newly allocated vector."""

from __future__ import annotations

import numpy as np

from vectorkit.core.validation import assert_same_length, assert_valid
from vectorkit.core.vector import Vector, from_array


def add(a: Vector, b: Vector) -> Vector:
    assert_same_length(a, b, "add")
    with np.errstate(over="ignore", invalid="ignore"):
        return from_array(a.values + b.values)


def subtract(a: Vector, b: Vector) -> Vector:
    assert_same_length(a, b, "subtract")
    with np.errstate(over="ignore", invalid="ignore"):
        return from_array(a.values - b.values)


def scale(a: Vector, c: float) -> Vector:
    assert_valid(a)
    with np.errstate(over="ignore", invalid="ignore"):
        return from_array(a.values * np.float64(c))


def divide(a: Vector, c: float) -> Vector:
    """Divide every element by ``c``. A zero divisor yields inf/NaN, not an error."""
    assert_valid(a)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return from_array(a.values / np.float64(c))
