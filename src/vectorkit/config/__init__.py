from .settings import (
    SETTINGS_ENV_VAR,
    SETTINGS_FILENAME,
    VectorSettings,
    load_settings,
    resolve_settings_path,
)

__all__ = [
    "SETTINGS_ENV_VAR",
    "SETTINGS_FILENAME",
    "VectorSettings",
    "load_settings",
    "resolve_settings_path",
]
