"""
Descriptive statistics over a single vector.

Degenerate inputs follow IEEE-754 rather than raising: the mean and standard
deviation of an empty vector are NaN. ``value_range`` is the exception since
it has no element to seed its scan from.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from vectorkit.core.errors import EmptyVectorError
from vectorkit.core.validation import assert_valid
from vectorkit.core.vector import Vector


def vector_sum(vec: Vector) -> float:
    assert_valid(vec)
    return float(np.sum(vec.values))


def _shifted(values: np.ndarray) -> Tuple[np.float64, np.ndarray]:
    # Offsets from element 0 are exactly zero for a constant vector.
    shift = values[0] if values.shape[0] and np.isfinite(values[0]) else np.float64(0.0)
    with np.errstate(over="ignore", invalid="ignore"):
        return shift, values - shift


def mean(vec: Vector) -> float:
    """Sum over length, computed on offsets from the first element."""
    assert_valid(vec)
    shift, offsets = _shifted(vec.values)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(shift + np.sum(offsets) / np.float64(len(vec)))


def min_max(vec: Vector) -> Tuple[float, float]:
    """Single scan tracking the running min and max, seeded from element 0."""
    assert_valid(vec)
    values = vec.values
    if values.shape[0] == 0:
        raise EmptyVectorError("range")
    lo = hi = values[0]
    for value in values[1:]:
        if value < lo:
            lo = value
        if value > hi:
            hi = value
    return float(lo), float(hi)


def value_range(vec: Vector) -> float:
    lo, hi = min_max(vec)
    return hi - lo


def std_dev(vec: Vector) -> float:
    """Population standard deviation (divisor n)."""
    assert_valid(vec)
    n = np.float64(len(vec))
    _, offsets = _shifted(vec.values)
    with np.errstate(divide="ignore", invalid="ignore"):
        deviations = offsets - np.sum(offsets) / n
        return float(np.sqrt(np.sum(deviations * deviations) / n))
