"""Geometric operations: magnitude, dot product, unit vector, projection, cosine."""

from __future__ import annotations

import numpy as np

from vectorkit.core.validation import assert_same_length, assert_valid
from vectorkit.core.vector import Vector
from vectorkit.ops.arithmetic import divide


def magnitude(vec: Vector) -> float:
    assert_valid(vec)
    values = vec.values
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sqrt(np.sum(values * values)))


def dot(a: Vector, b: Vector) -> float:
    assert_same_length(a, b, "dot")
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sum(a.values * b.values))


def unit(vec: Vector) -> Vector:
    """Scale ``vec`` to magnitude 1. A zero vector produces NaN components."""
    return divide(vec, magnitude(vec))


def project(a: Vector, b: Vector) -> float:
    """Scalar projection of ``a`` onto ``b``."""
    b_unit = unit(b)
    try:
        return dot(a, b_unit)
    finally:
        b_unit.release()


def cosine(a: Vector, b: Vector) -> float:
    dp = dot(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(dp) / (np.float64(magnitude(a)) * np.float64(magnitude(b))))
