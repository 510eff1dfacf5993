from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ..errors import SettingNotFoundError, SettingsIOError, SettingsStateError
from . import codec
from .convert import Value, format_value, parse_value

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class SettingsStore:
    """In-memory settings mapping with file-backed load/save.

    Values are always stored as strings; the typed accessors convert on the
    way in and out. Every public method holds the store's lock for its whole
    duration, file I/O included.
    """

    _settings: Dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _current_path: Optional[Path] = field(default=None, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def current_path(self) -> Optional[Path]:
        """File used by :meth:`save`: the last one loaded or saved to."""
        with self._lock:
            return self._current_path

    # File handling -------------------------------------------------------
    def ensure_file_exists(self, path: codec.PathLike, parents: bool = False) -> None:
        """Create an empty file at ``path`` unless one already exists."""
        path = Path(path)
        with self._lock:
            if path.exists():
                return
            try:
                if parents:
                    path.parent.mkdir(parents=True, exist_ok=True)
                with open(path, "ab"):
                    pass
            except OSError as e:
                raise SettingsIOError(f"Unable to create settings file: {path}", path) from e
            logger.debug("Created empty settings file %s", path)

    def load(self, path: codec.PathLike) -> None:
        """Replace all settings with the contents of ``path``.

        On failure the previous settings and current path are kept.
        """
        path = Path(path)
        with self._lock:
            try:
                text = codec.read_text(path)
            except OSError as e:
                raise SettingsIOError(f"Unable to open settings file: {path}", path) from e
            data, skipped = codec.parse_lines(text)
            self._settings = data
            self._current_path = path
        if skipped:
            logger.debug("Skipped %d malformed line(s) in %s", skipped, path)
        logger.debug("Loaded %d setting(s) from %s", len(data), path)

    def save(self) -> None:
        """Write all settings to :attr:`current_path`."""
        with self._lock:
            if self._current_path is None:
                raise SettingsStateError("No filename specified for saving settings.")
            self._write(self._current_path)

    def save_as(self, path: codec.PathLike) -> None:
        """Write all settings to ``path`` and make it the current path."""
        path = Path(path)
        with self._lock:
            self._write(path)
            self._current_path = path

    def _write(self, path: Path) -> None:
        # Caller holds the lock.
        try:
            codec.write_text(path, codec.format_lines(self._settings))
        except UnicodeError as e:
            raise SettingsIOError(f"Unable to encode settings for file: {path}", path) from e
        except OSError as e:
            raise SettingsIOError(f"Unable to write settings file: {path}", path) from e
        logger.debug("Saved %d setting(s) to %s", len(self._settings), path)

    # String access -------------------------------------------------------
    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._settings[key]
            except KeyError:
                raise SettingNotFoundError(key) from None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._settings[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            try:
                del self._settings[key]
            except KeyError:
                raise SettingNotFoundError(key) from None

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all settings."""
        with self._lock:
            return dict(self._settings)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._settings

    def __len__(self) -> int:
        with self._lock:
            return len(self._settings)

    # Typed access --------------------------------------------------------
    def get_as(self, key: str, kind: type) -> Value:
        """Return setting ``key`` converted to ``kind`` (int, float or bool).

        Raises ``SettingNotFoundError`` when the key is missing and
        ``ConversionError`` when a numeric value does not parse. Booleans
        never fail: only ``"true"`` and ``"1"`` are true.
        """
        return parse_value(self.get(key), kind, key)

    def set_as(self, key: str, value: Value) -> None:
        """Store ``value`` in its canonical string form."""
        self.set(key, format_value(value))

    def get_int(self, key: str) -> int:
        return self.get_as(key, int)  # type: ignore[return-value]

    def get_float(self, key: str) -> float:
        return self.get_as(key, float)  # type: ignore[return-value]

    def get_bool(self, key: str) -> bool:
        return self.get_as(key, bool)  # type: ignore[return-value]

    def set_int(self, key: str, value: int) -> None:
        self.set_as(key, int(value))

    def set_float(self, key: str, value: float) -> None:
        self.set_as(key, float(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.set_as(key, bool(value))
