"""Normalization transforms producing new vectors."""

from __future__ import annotations

import numpy as np

from vectorkit.core.validation import assert_valid
from vectorkit.core.vector import Vector, construct, from_array
from vectorkit.ops.statistics import mean, min_max, std_dev


def clamp(a: Vector, lo: float, hi: float) -> Vector:
    """Bound every element to ``[lo, hi]``; the lower bound is checked first."""
    assert_valid(a)
    values = a.values
    result = np.where(values < lo, lo, np.where(values > hi, hi, values))
    return from_array(result.astype(np.float64))


def minmax_scale(a: Vector) -> Vector:
    """Map elements to ``(x - min) / (max - min)``. Constant input yields NaN."""
    assert_valid(a)
    if len(a) == 0:
        return construct(0)
    lo, hi = min_max(a)
    with np.errstate(divide="ignore", invalid="ignore"):
        return from_array((a.values - lo) / np.float64(hi - lo))


def standardize(a: Vector) -> Vector:
    assert_valid(a)
    mu = mean(a)
    sigma = std_dev(a)
    with np.errstate(divide="ignore", invalid="ignore"):
        return from_array((a.values - mu) / np.float64(sigma))
