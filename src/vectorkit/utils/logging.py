import json
import logging
import os
import sys
from logging import Logger
from typing import Optional, TextIO, Tuple

# Structured fields vectorkit attaches through ``extra=`` on file and
# fail-fast log records.
VECTOR_LOG_FIELDS: Tuple[str, ...] = ("vector_path", "vector_length", "operation")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, including any vectorkit ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        for field in VECTOR_LOG_FIELDS:
            if hasattr(record, field):
                log[field] = getattr(record, field)
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log, default=str)


def configure_logging(
    level: Optional[str] = None,
    json_output: bool = False,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logging for vectorkit tools.

    Records go to ``stream`` (stderr by default) so they never interleave with
    vectors printed on stdout. The level falls back to ``LOG_LEVEL`` and then
    INFO; an unknown level name also means INFO.
    """
    effective_level = level or os.getenv("LOG_LEVEL") or "INFO"
    handlers = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(
        level=getattr(logging, effective_level.upper(), logging.INFO),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
