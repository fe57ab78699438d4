"""
Owned, fixed-length vector of floats.

The buffer is a one-dimensional numpy ``float64`` array paired with an
explicit length, so any float (NaN and infinities included) is a legal
element and length lookup never scans.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

import numpy as np

from vectorkit.core.errors import AllocationError, InvalidVectorError

logger = logging.getLogger(__name__)


class Vector:
    """Fixed-length sequence of floats, released explicitly with ``release``."""

    __slots__ = ("_data", "_length")

    def __init__(self, data: np.ndarray) -> None:
        data = np.array(data, dtype=np.float64, copy=True)
        if data.ndim != 1:
            raise ValueError(f"Vector data must be one-dimensional, got shape {data.shape}")
        self._data: Optional[np.ndarray] = data
        self._length = int(data.shape[0])

    @classmethod
    def _adopt(cls, data: np.ndarray) -> "Vector":
        # Wraps a freshly allocated buffer without copying it.
        vec = cls.__new__(cls)
        vec._data = data
        vec._length = int(data.shape[0])
        return vec

    @property
    def released(self) -> bool:
        return self._data is None

    def _buffer(self) -> np.ndarray:
        if self._data is None:
            raise InvalidVectorError("Attempting to manipulate a released vector")
        return self._data

    def __len__(self) -> int:
        self._buffer()
        return self._length

    def __getitem__(self, index: int) -> float:
        return float(self._buffer()[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._buffer()[self._check_index(index)] = value

    def __iter__(self) -> Iterator[float]:
        for value in self._buffer():
            yield float(value)

    def __repr__(self) -> str:
        if self._data is None:
            return "Vector(<released>)"
        from vectorkit.core.formatting import format_vector

        return f"Vector({format_vector(self)})"

    def _check_index(self, index: int) -> int:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError(f"Vector index out of range for length {self._length}")
        return int(index)

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the elements."""
        view = self._buffer().view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> np.ndarray:
        """Return an independent copy of the elements."""
        return self._buffer().copy()

    def tolist(self) -> List[float]:
        return [float(value) for value in self._buffer()]

    def release(self) -> None:
        """Free the buffer. Any later use of this vector raises InvalidVectorError."""
        self._buffer()
        self._data = None


def construct(n: int) -> Vector:
    """Allocate a vector of ``n`` zeros."""
    n = int(n)
    if n < 0:
        raise ValueError(f"Vector length must be non-negative, got {n}")
    try:
        data = np.zeros(n, dtype=np.float64)
    except (MemoryError, ValueError) as exc:
        logger.error("Failed to allocate vector of length %d", n)
        raise AllocationError(n) from exc
    return Vector._adopt(data)


def fill(n: int, scalar: float) -> Vector:
    vec = construct(n)
    vec._buffer()[:] = scalar
    return vec


def ones(n: int) -> Vector:
    return fill(n, 1.0)


def from_values(values: Iterable[float]) -> Vector:
    """Build a vector holding a copy of ``values``."""
    return from_array(np.array([float(value) for value in values], dtype=np.float64))


def from_array(array: np.ndarray) -> Vector:
    """Build a vector holding a copy of a one-dimensional array."""
    source = np.asarray(array, dtype=np.float64)
    if source.ndim != 1:
        raise ValueError(f"Vector data must be one-dimensional, got shape {source.shape}")
    vec = construct(source.shape[0])
    vec._buffer()[:] = source
    return vec
