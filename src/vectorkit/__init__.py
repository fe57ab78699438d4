"""
vectorkit: a minimal numeric vector library.

- Construction: construct, fill, ones, from_values, read_vector
- Arithmetic: add, subtract, scale, divide
- Geometry: magnitude, dot, unit, project, cosine
- Statistics: vector_sum, mean, value_range, std_dev
- Transforms: clamp, minmax_scale, standardize
- Presentation and files: format_vector, print_vector, write_vector

Operations raise ``VectorError`` subclasses; ``vectorkit.strict`` offers the
same names as fail-fast wrappers that exit the process instead.
"""

__version__ = "0.1.0"

from vectorkit.core import (
    DEFAULT_PRINT_PRECISION,
    AllocationError,
    EmptyVectorError,
    InvalidVectorError,
    LengthMismatchError,
    Vector,
    VectorError,
    VectorFileError,
    assert_same_length,
    assert_valid,
    construct,
    fill,
    format_vector,
    from_array,
    from_values,
    length,
    ones,
    print_vector,
    release,
)
from vectorkit.ops import (
    add,
    clamp,
    cosine,
    divide,
    dot,
    magnitude,
    mean,
    min_max,
    minmax_scale,
    project,
    scale,
    standardize,
    std_dev,
    subtract,
    unit,
    value_range,
    vector_sum,
)
from vectorkit.storage import DEFAULT_WRITE_PRECISION, count_lines, parse_value, read_vector, write_vector

__all__ = [
    "DEFAULT_PRINT_PRECISION",
    "DEFAULT_WRITE_PRECISION",
    "AllocationError",
    "EmptyVectorError",
    "InvalidVectorError",
    "LengthMismatchError",
    "Vector",
    "VectorError",
    "VectorFileError",
    "assert_same_length",
    "assert_valid",
    "construct",
    "fill",
    "format_vector",
    "from_array",
    "from_values",
    "length",
    "ones",
    "print_vector",
    "release",
    "add",
    "clamp",
    "cosine",
    "divide",
    "dot",
    "magnitude",
    "mean",
    "min_max",
    "minmax_scale",
    "project",
    "scale",
    "standardize",
    "std_dev",
    "subtract",
    "unit",
    "value_range",
    "vector_sum",
    "count_lines",
    "parse_value",
    "read_vector",
    "write_vector",
]
