"""Command line interface for the assistant settings editor."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .launcher import launch_assistant
from .log_utils import mask_secret, setup_logging
from .settings import ENV_KEYS, PERSONALIZATION_FIELDS
from .settings.env_file import SECRET_KEYS
from .store import ConfigurationStore

logger = logging.getLogger(__name__)

_ENV_CONFIG_DIR = "ASSISTANT_CONFIG_DIR"


def _default_dir() -> str:
    return (os.environ.get(_ENV_CONFIG_DIR) or "").strip() or os.getcwd()


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="assistant-config",
        description="Edit the AI assistant's .env and personalization.json, or launch it.",
    )
    ap.add_argument("--dir", default=None, help=f"Assistant folder holding .env (default: ${_ENV_CONFIG_DIR} or cwd)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = ap.add_subparsers(dest="command")

    p_show = sub.add_parser("show", help="Print the current settings")
    p_show.add_argument("--reveal", action="store_true", help="Print API keys unmasked")

    p_env = sub.add_parser("set-env", help="Set one .env value and save")
    p_env.add_argument("key", choices=[k for k, _ in ENV_KEYS])
    p_env.add_argument("value")

    p_pers = sub.add_parser("set-personalization", help="Set one personalization field and save")
    p_pers.add_argument("field", choices=list(PERSONALIZATION_FIELDS))
    p_pers.add_argument("value", nargs="?", default=None, help="New value (string fields)")
    p_pers.add_argument("--url", action="append", default=None, help="Browser URL (repeat; for browser_urls)")

    sub.add_parser("reset", help="Reset both files to the defaults")

    p_launch = sub.add_parser("launch", help="Launch the assistant")
    p_launch.add_argument("--prompt", default=None, help="Optional initial prompt")

    sub.add_parser("gui", help="Open the settings editor window (default)")
    return ap


def _print_settings(store: ConfigurationStore, reveal: bool) -> None:
    print(f"# {store.env_path}")
    for key, value in store.env_values().items():
        if key in SECRET_KEYS and not reveal:
            value = mask_secret(value)
        print(f"{key}={value}")
    print()
    print(f"# {store.personalization_path}")
    print(store.personalization_snapshot().to_json(), end="")


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    setup_logging(verbose=args.verbose, stream=sys.stderr)

    base_dir = args.dir or _default_dir()
    command = args.command or "gui"

    if command == "gui":
        from .gui import main as gui_main

        gui_main(base_dir=base_dir)
        return 0

    store = ConfigurationStore(base_dir)

    if command == "show":
        _print_settings(store, args.reveal)
        return 0

    if command == "set-env":
        store.set_env(args.key, args.value)
        return 0 if store.save_env() else 1

    if command == "set-personalization":
        if args.field == "browser_urls":
            if args.value is not None:
                ap.error("browser_urls takes --url values, not a positional value")
            store.set_personalization("browser_urls", args.url or [])
        else:
            if args.value is None or args.url:
                ap.error(f"{args.field} takes exactly one positional value")
            store.set_personalization(args.field, args.value)
        return 0 if store.save_personalization() else 1

    if command == "reset":
        return 0 if store.reset_to_defaults() else 1

    if command == "launch":
        if not launch_assistant(args.prompt, cwd=store.base_dir):
            print("Failed to launch the assistant; see the log for details.")
            return 1
        print("Assistant launched.")
        return 0

    ap.error(f"unknown command: {command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
