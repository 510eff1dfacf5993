"""Command line interface for flatkv settings files."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import __version__
from .config import default_settings_path
from .errors import SettingsError, describe
from .log_utils import setup_logging
from .settings import SettingsStore, format_value, parse_value

logger = logging.getLogger(__name__)

_KINDS = {"str": str, "int": int, "float": float, "bool": bool}


def _parse_bool_arg(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _coerce_arg(text: str, kind: str) -> str:
    """Normalize a command line value to the canonical string for ``kind``."""
    if kind == "str":
        return text
    if kind == "bool":
        return format_value(_parse_bool_arg(text))
    return format_value(parse_value(text, _KINDS[kind]))


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="flatkv", description="Inspect and edit a key=value settings file.")
    ap.add_argument("--file", "-f", default=None,
                    help="Settings file (default: $FLATKV_SETTINGS or ~/.flatkv/settings.txt)")
    ap.add_argument("--verbose", "-v", action="count", default=0, help="More logging (-vv for debug)")
    ap.add_argument("--log-file", default=None, help="Also append log output to this file")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="Create the settings file if it does not exist")

    p_get = sub.add_parser("get", help="Print a setting")
    p_get.add_argument("key")
    p_get.add_argument("--as", dest="kind", default="str", choices=sorted(_KINDS))

    p_set = sub.add_parser("set", help="Set a setting and save the file")
    p_set.add_argument("key")
    p_set.add_argument("value")
    p_set.add_argument("--as", dest="kind", default="str", choices=sorted(_KINDS))

    p_unset = sub.add_parser("unset", help="Remove a setting and save the file")
    p_unset.add_argument("key")

    sub.add_parser("list", help="Print all settings, sorted by key")
    return ap


def _cmd_get(store: SettingsStore, args: argparse.Namespace) -> None:
    if args.kind == "str":
        print(store.get(args.key))
    else:
        print(format_value(store.get_as(args.key, _KINDS[args.kind])))


def _cmd_set(store: SettingsStore, args: argparse.Namespace) -> None:
    store.set(args.key, _coerce_arg(args.value, args.kind))
    store.save()
    logger.info("Set %s in %s", args.key, store.current_path)


def _cmd_unset(store: SettingsStore, args: argparse.Namespace) -> None:
    store.remove(args.key)
    store.save()
    logger.info("Removed %s from %s", args.key, store.current_path)


def _cmd_list(store: SettingsStore, args: argparse.Namespace) -> None:
    for key, value in sorted(store.snapshot().items()):
        print(f"{key}={value}")


_COMMANDS: Dict[str, Callable[[SettingsStore, argparse.Namespace], None]] = {
    "get": _cmd_get,
    "set": _cmd_set,
    "unset": _cmd_unset,
    "list": _cmd_list,
}


def _run(args: argparse.Namespace) -> int:
    path = args.file or default_settings_path()
    store = SettingsStore()

    if args.command == "init":
        store.ensure_file_exists(path, parents=True)
        print(path)
        return 0

    if args.command in ("set", "unset"):
        store.ensure_file_exists(path, parents=True)
    store.load(path)
    _COMMANDS[args.command](store, args)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    setup_logging(level, args.log_file)

    try:
        return _run(args)
    except (SettingsError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {describe(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
