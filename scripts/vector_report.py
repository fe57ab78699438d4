#!/usr/bin/env python3
"""
Print a vector file together with its descriptive statistics.

Usage:
    python scripts/vector_report.py data/signal.dat
    python scripts/vector_report.py data/signal.dat --precision 4
    python scripts/vector_report.py data/signal.dat --config vectorkit-config.json
    python scripts/vector_report.py data/signal.dat --json-logs --log-file report.log
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from vectorkit import strict
from vectorkit.config import load_settings
from vectorkit.utils import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a vector file and its statistics")
    parser.add_argument("path", type=Path, help="Vector file, one value per line")
    parser.add_argument("--precision", type=int, default=None, help="Digits after the decimal point")
    parser.add_argument("--config", type=Path, default=None, help="Settings JSON file")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit log records as JSON on stderr")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        settings, settings_path = load_settings(args.config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    configure_logging(args.log_level or settings.log_level, json_output=args.json_logs, log_file=args.log_file)
    logger.debug("Using settings from %s", settings_path)
    precision = args.precision if args.precision is not None else settings.print_precision

    vec = strict.read_vector(args.path)
    logger.info("Loaded %d values", strict.length(vec), extra={"vector_path": str(args.path)})
    strict.print_vector(vec, precision)
    print(f"sum={strict.vector_sum(vec):.{precision}f}")
    print(f"mean={strict.mean(vec):.{precision}f}")
    if strict.length(vec) > 0:
        print(f"range={strict.value_range(vec):.{precision}f}")
    print(f"std={strict.std_dev(vec):.{precision}f}")
    strict.release(vec)


if __name__ == "__main__":
    main()
