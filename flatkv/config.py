from __future__ import annotations

import os
from pathlib import Path

ENV_SETTINGS_PATH = "FLATKV_SETTINGS"
DEFAULT_FILENAME = "settings.txt"


def _flatkv_home() -> Path:
    return Path.home() / ".flatkv"


def default_settings_path() -> Path:
    """Settings file used when none is given explicitly.

    ``$FLATKV_SETTINGS`` wins; otherwise ``~/.flatkv/settings.txt``.
    """
    env = os.environ.get(ENV_SETTINGS_PATH)
    if env:
        return Path(env).expanduser()
    return _flatkv_home() / DEFAULT_FILENAME
