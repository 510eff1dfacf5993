"""Exceptions raised by the settings store.

Every error derives from :class:`SettingsError` and also from the closest
builtin, so callers can catch either ``SettingsError`` or e.g. ``KeyError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class SettingsError(Exception):
    """Base class for all settings errors."""


class SettingsIOError(SettingsError, OSError):
    """A settings file could not be created, read or written."""

    def __init__(self, message: str, path: Union[str, Path, None] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SettingNotFoundError(SettingsError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key.
        return f"Setting not found: {self.key}"


class ConversionError(SettingsError, ValueError):
    """A stored string is not a valid value of the requested type."""

    def __init__(self, value: str, kind: type, key: Optional[str] = None) -> None:
        super().__init__(value, kind, key)
        self.value = value
        self.kind = kind
        self.key = key

    def __str__(self) -> str:
        where = f" for setting {self.key!r}" if self.key is not None else ""
        return f"Cannot convert {self.value!r}{where} to {self.kind.__name__}"


class SettingsStateError(SettingsError, RuntimeError):
    """The store is not in a state that allows the requested operation."""


def describe(exc: BaseException) -> str:
    """Short one-line description of an error for CLI output."""
    if isinstance(exc, SettingsError):
        return str(exc)
    return f"{type(exc).__name__}: {exc}"
