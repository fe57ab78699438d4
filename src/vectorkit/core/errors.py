"""Error taxonomy for vector operations."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class VectorError(Exception):
    """Base class for every error raised by vectorkit."""


class AllocationError(VectorError, MemoryError):
    """Raised when the buffer for a vector cannot be allocated."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Failed to allocate memory for vector of length {length}")


class InvalidVectorError(VectorError, TypeError):
    """Raised when an operation receives None, a non-vector or a released vector."""


class LengthMismatchError(VectorError, ValueError):
    """Raised by pairwise operations on vectors of different lengths."""

    def __init__(self, left: int, right: int, operation: str = "add") -> None:
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Attempting to add vectors of unequal length: {left} - {right}")


class VectorFileError(VectorError, OSError):
    """Raised when a vector file cannot be opened."""

    def __init__(self, path: Union[str, Path], message: str) -> None:
        self.path = str(path)
        super().__init__(f"{message}: {self.path}")


class EmptyVectorError(VectorError, ValueError):
    """Raised by operations that need at least one element."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty vector")
