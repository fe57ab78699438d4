"""Loading of vectorkit settings (print/write precision, log level)."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from vectorkit.core.formatting import DEFAULT_PRINT_PRECISION
from vectorkit.storage.text_format import DEFAULT_WRITE_PRECISION

SETTINGS_FILENAME = "vectorkit-config.json"
SETTINGS_ENV_VAR = "VECTORKIT_CONFIG_PATH"


@dataclass
class VectorSettings:
    """
    Tunables for presentation and file output.

    Attributes:
        print_precision: Digits after the decimal point in ``format_vector``.
        write_precision: Digits after the decimal point in vector files.
        log_level: Level name handed to ``configure_logging``.
    """

    print_precision: int = DEFAULT_PRINT_PRECISION
    write_precision: int = DEFAULT_WRITE_PRECISION
    log_level: str = "INFO"

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "VectorSettings":
        if not data:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key in ("print_precision", "write_precision"):
                precision = int(value)
                if precision < 0:
                    raise ValueError(f"Setting '{key}' must be non-negative")
                kwargs[key] = precision
            elif key == "log_level":
                level = str(value).strip().upper()
                if not level:
                    raise ValueError("Setting 'log_level' cannot be empty")
                kwargs[key] = level
            else:
                raise ValueError(f"Unknown setting '{key}'")
        return cls(**kwargs)


def resolve_settings_path(path: Optional[Path] = None) -> Path:
    """Explicit path first, then the environment variable, then the working directory."""
    if path is not None:
        return Path(path).resolve()
    env_value = os.getenv(SETTINGS_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / SETTINGS_FILENAME).resolve()


def load_settings(path: Optional[Path] = None) -> Tuple[VectorSettings, Path]:
    """
    Load settings from JSON.

    Returns:
        (settings, resolved_path). A missing file yields default settings.

    Raises:
        ValueError: if the JSON is invalid or a setting fails validation.
    """
    resolved = resolve_settings_path(path)
    if not resolved.exists():
        return VectorSettings(), resolved
    try:
        data = json.loads(resolved.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid settings JSON at {resolved}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Settings at {resolved} must be a JSON object")
    return VectorSettings.from_mapping(data), resolved
