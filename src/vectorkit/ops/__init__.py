from .arithmetic import add, divide, scale, subtract
from .geometry import cosine, dot, magnitude, project, unit
from .statistics import mean, min_max, std_dev, value_range, vector_sum
from .transforms import clamp, minmax_scale, standardize

__all__ = [
    "add",
    "divide",
    "scale",
    "subtract",
    "cosine",
    "dot",
    "magnitude",
    "project",
    "unit",
    "mean",
    "min_max",
    "std_dev",
    "value_range",
    "vector_sum",
    "clamp",
    "minmax_scale",
    "standardize",
]
