"""
Fail-fast variants of the vectorkit operations.

Each wrapper turns a ``VectorError`` into ``SystemExit`` carrying the one-line
diagnostic, so the interpreter prints it to stderr and exits with status 1.
Use these at call sites that want terminate-on-error behavior; everything
else should call the raising API and handle ``VectorError`` itself.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, TypeVar

from vectorkit.core import formatting, validation, vector
from vectorkit.core.errors import VectorError
from vectorkit.ops import arithmetic, geometry, statistics, transforms
from vectorkit.storage import text_format

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def exit_on_error(func: F) -> F:
    """Wrap ``func`` so a VectorError terminates the process."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except VectorError as exc:
            logger.error("%s failed: %s", func.__name__, exc, extra={"operation": func.__name__})
            raise SystemExit(str(exc)) from exc

    return wrapper  # type: ignore[return-value]


construct = exit_on_error(vector.construct)
fill = exit_on_error(vector.fill)
ones = exit_on_error(vector.ones)
from_values = exit_on_error(vector.from_values)
length = exit_on_error(validation.length)
release = exit_on_error(validation.release)
assert_valid = exit_on_error(validation.assert_valid)

read_vector = exit_on_error(text_format.read_vector)
write_vector = exit_on_error(text_format.write_vector)
format_vector = exit_on_error(formatting.format_vector)
print_vector = exit_on_error(formatting.print_vector)

add = exit_on_error(arithmetic.add)
subtract = exit_on_error(arithmetic.subtract)
scale = exit_on_error(arithmetic.scale)
divide = exit_on_error(arithmetic.divide)

magnitude = exit_on_error(geometry.magnitude)
dot = exit_on_error(geometry.dot)
unit = exit_on_error(geometry.unit)
project = exit_on_error(geometry.project)
cosine = exit_on_error(geometry.cosine)

vector_sum = exit_on_error(statistics.vector_sum)
mean = exit_on_error(statistics.mean)
value_range = exit_on_error(statistics.value_range)
std_dev = exit_on_error(statistics.std_dev)

clamp = exit_on_error(transforms.clamp)
minmax_scale = exit_on_error(transforms.minmax_scale)
standardize = exit_on_error(transforms.standardize)
