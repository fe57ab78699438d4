"""Human-readable rendering: ``[v1 v2 ... vn] n=<length>``."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from vectorkit.core.validation import assert_valid
from vectorkit.core.vector import Vector

DEFAULT_PRINT_PRECISION = 2


def format_vector(vec: Vector, precision: int = DEFAULT_PRINT_PRECISION) -> str:
    """
    Render ``vec`` with ``precision`` digits after the decimal point.

    e.g. precision=2, length=3 -> ``[1.00 1.00 1.00] n=3``
    """
    assert_valid(vec)
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    body = " ".join(f"{value:.{precision}f}" for value in vec.values)
    return f"[{body}] n={len(vec)}"


def print_vector(
    vec: Vector,
    precision: int = DEFAULT_PRINT_PRECISION,
    file: Optional[TextIO] = None,
) -> None:
    stream = file if file is not None else sys.stdout
    stream.write(format_vector(vec, precision) + "\n")
