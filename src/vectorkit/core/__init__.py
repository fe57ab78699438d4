from .errors import (
    AllocationError,
    EmptyVectorError,
    InvalidVectorError,
    LengthMismatchError,
    VectorError,
    VectorFileError,
)
from .formatting import DEFAULT_PRINT_PRECISION, format_vector, print_vector
from .validation import assert_same_length, assert_valid, length, release
from .vector import Vector, construct, fill, from_array, from_values, ones

__all__ = [
    "AllocationError",
    "EmptyVectorError",
    "InvalidVectorError",
    "LengthMismatchError",
    "VectorError",
    "VectorFileError",
    "DEFAULT_PRINT_PRECISION",
    "format_vector",
    "print_vector",
    "assert_same_length",
    "assert_valid",
    "length",
    "release",
    "Vector",
    "construct",
    "fill",
    "from_array",
    "from_values",
    "ones",
]
