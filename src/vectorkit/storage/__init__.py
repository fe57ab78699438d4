from .text_format import (
    DEFAULT_WRITE_PRECISION,
    count_lines,
    parse_value,
    read_vector,
    write_vector,
)

__all__ = [
    "DEFAULT_WRITE_PRECISION",
    "count_lines",
    "parse_value",
    "read_vector",
    "write_vector",
]
