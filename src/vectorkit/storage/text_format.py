"""
Plain-text vector files (``.dat``).

One decimal literal per line, no header and no length field: the number of
lines is the vector length. Values are written with six digits after the
decimal point, so a write/read round trip is lossy to that precision.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Union

from vectorkit.core.errors import VectorFileError
from vectorkit.core.validation import assert_valid
from vectorkit.core.vector import Vector, construct

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_WRITE_PRECISION = 6

_HEX_PREFIX = re.compile(
    r"\s*([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_DECIMAL_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_value(text: str) -> float:
    """
    Parse the longest numeric prefix of ``text`` the way C ``atof`` does.

    Leading whitespace is skipped and trailing garbage ignored. Text with no
    numeric prefix parses as 0.0; this never raises.
    """
    match = _HEX_PREFIX.match(text)
    if match:
        literal = match.group(1)
        sign = -1.0 if literal.startswith("-") else 1.0
        digits = literal.lstrip("+-")
        if "p" not in digits.lower():
            digits += "p0"
        return sign * float.fromhex(digits)
    match = _DECIMAL_PREFIX.match(text)
    if not match:
        logger.debug("No numeric prefix in %r, using 0.0", text)
        return 0.0
    return float(match.group(1))


def count_lines(path: PathLike) -> int:
    """Count ``\\n``-delimited lines in ``path``; a final unterminated line still counts."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as handle:
            return sum(1 for _ in handle)
    except OSError as exc:
        raise VectorFileError(path, "File does not exist") from exc


def read_vector(path: PathLike) -> Vector:
    """Read a vector file, one value per line, in file order."""
    try:
        handle = open(path, "r", encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise VectorFileError(path, "File does not exist") from exc
    with handle:
        n = count_lines(path)
        vec = construct(n)
        for index, line in zip(range(n), handle):
            vec[index] = parse_value(line)
    logger.debug(
        "Read vector of length %d from %s", n, path,
        extra={"vector_path": str(path), "vector_length": n},
    )
    return vec


def write_vector(path: PathLike, vec: Vector, precision: int = DEFAULT_WRITE_PRECISION) -> None:
    """Write every element of ``vec`` as a newline-terminated decimal literal."""
    assert_valid(vec)
    if precision < 0:
        raise ValueError(f"Precision must be non-negative, got {precision}")
    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise VectorFileError(path, "Cannot open file for writing") from exc
    with handle:
        for value in vec.values:
            handle.write(f"{value:.{precision}f}\n")
    logger.debug(
        "Wrote vector of length %d to %s", len(vec), path,
        extra={"vector_path": str(path), "vector_length": len(vec)},
    )
