from .logging import VECTOR_LOG_FIELDS, JsonFormatter, configure_logging, get_logger

__all__ = [
    "VECTOR_LOG_FIELDS",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
