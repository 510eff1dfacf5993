"""The ``key=value`` line format.

Each line is split at its first ``=``: the key is everything before it, the
value everything after (so values may contain ``=``). Lines without ``=`` or
with nothing after it are dropped. There are no comments, no quoting and no
whitespace trimming.

Files are handled as bytes and decoded as UTF-8 with ``surrogateescape``, so
content that is not valid UTF-8 is written back byte-for-byte.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

ENCODING = "utf-8"
ERRORS = "surrogateescape"

PathLike = Union[str, Path]


def parse_lines(text: str) -> Tuple[Dict[str, str], int]:
    """Parse settings text.

    Returns the parsed mapping (later duplicates overwrite earlier ones) and
    the number of non-empty lines that were skipped as malformed.
    """
    data: Dict[str, str] = {}
    skipped = 0
    for line in text.split("\n"):
        key, sep, value = line.partition("=")
        if not sep or not value:
            if line:
                skipped += 1
            continue
        data[key] = value
    return data, skipped


def format_lines(mapping: Mapping[str, str]) -> str:
    return "".join(f"{key}={value}\n" for key, value in mapping.items())


def read_text(path: PathLike) -> str:
    return Path(path).read_bytes().decode(ENCODING, ERRORS)


def write_text(path: PathLike, text: str) -> None:
    # Encode first: opening with "wb" truncates the file.
    data = text.encode(ENCODING, ERRORS)
    with open(path, "wb") as f:
        f.write(data)
