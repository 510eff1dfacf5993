"""flatkv: a small key=value settings store backed by a flat text file."""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import (
    ConversionError,
    SettingNotFoundError,
    SettingsError,
    SettingsIOError,
    SettingsStateError,
)
from .settings import SettingsStore

__all__ = [
    "ConversionError",
    "SettingNotFoundError",
    "SettingsError",
    "SettingsIOError",
    "SettingsStateError",
    "SettingsStore",
    "__version__",
]
