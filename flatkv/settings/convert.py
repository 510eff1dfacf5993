"""Conversions between canonical setting strings and typed values.

Only a closed set of types is supported: ``int``, ``float`` and ``bool``.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Union

from ..errors import ConversionError

Value = Union[int, float, bool]

SUPPORTED_TYPES = (int, float, bool)

TRUE_STRINGS = frozenset({"true", "1"})

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str, key: Optional[str] = None) -> int:
    # ASCII digits only; int() alone would also accept "1_000", " 7 " and
    # non-ASCII digits.
    if not _INT_RE.fullmatch(text):
        raise ConversionError(text, int, key)
    return int(text, 10)


def parse_float(text: str, key: Optional[str] = None) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ConversionError(text, float, key)
    try:
        return float(text)
    except ValueError as e:
        raise ConversionError(text, float, key) from e


def parse_bool(text: str, key: Optional[str] = None) -> bool:
    """``"true"`` and ``"1"`` are true; everything else is false."""
    return text in TRUE_STRINGS


PARSERS: Dict[type, Callable[..., Value]] = {
    int: parse_int,
    float: parse_float,
    bool: parse_bool,
}


def parse_value(text: str, kind: type, key: Optional[str] = None) -> Value:
    try:
        parser = PARSERS[kind]
    except KeyError:
        raise TypeError(f"Unsupported setting type: {kind!r}") from None
    return parser(text, key)


def format_value(value: Value) -> str:
    """Canonical, locale-independent string form of a typed value."""
    # bool first: it is a subclass of int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return repr(float(value))
    raise TypeError(f"Unsupported setting value type: {type(value).__name__}")
