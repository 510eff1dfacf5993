"""Logging setup for the command line.

Library modules only create loggers; handlers are configured here, and only
by entry points such as :mod:`flatkv.cli`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Union[str, Path, None] = None) -> Optional[Path]:
    """Configure the root logger.

    An existing logging configuration (e.g. when embedded in an application
    or running under pytest) is left alone apart from the level. Returns the
    log file path when one was attached.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    else:
        root.setLevel(level)

    if log_file is None:
        return None

    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
    return log_path
