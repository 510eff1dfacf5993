"""File-backed settings for flatkv.

Settings live in a plain text file, one ``key=value`` pair per line. A
:class:`SettingsStore` loads that file into memory, offers typed get/set
access and writes the mapping back on demand.

Design goals:
  * Thread safe (one lock per store, held for every operation)
  * Lenient loads (malformed lines are dropped, not reported)
  * No hidden global state (callers own their store)
"""

from .convert import SUPPORTED_TYPES, format_value, parse_value
from .store import SettingsStore

__all__ = ["SUPPORTED_TYPES", "SettingsStore", "format_value", "parse_value"]
