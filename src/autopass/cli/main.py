"""CLI entrypoint for single-entry operations."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from autopass import __version__
from autopass.cache import update_cache
from autopass.config import load_config
from autopass.constants.branding import CLI_DESCRIPTION
from autopass.entry import Entry, EntryContext
from autopass.exceptions import AutopassError, ConfigError, URLNotFoundError
from autopass.notify import DesktopNotifier, LogNotifier


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="autopass-entry", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--desktop-notify",
        action="store_true",
        help="Also report parse problems with notify-send",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Decrypt an entry and print its attributes")
    show.add_argument("entry", type=Path, help="Path to the encrypted entry file")
    show.add_argument("--json", action="store_true", help="Print the cacheable snapshot as JSON")
    show.add_argument("--cache", action="store_true", help="Record the decrypted entry in the cache file")

    match = subparsers.add_parser("match", help="Check whether an entry applies to a window title")
    match.add_argument("entry", type=Path, help="Path to the encrypted entry file")
    match.add_argument("-t", "--title", required=True, help="Window title to match against")

    open_url = subparsers.add_parser("open", help="Open the entry's url in a browser")
    open_url.add_argument("entry", type=Path, help="Path to the encrypted entry file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    notifier = DesktopNotifier() if args.desktop_notify else LogNotifier()
    context = EntryContext(config=config, notifier=notifier)

    entry_path = args.entry.expanduser().absolute()
    if not entry_path.is_file():
        print(f"Entry file not found: {entry_path}", file=sys.stderr)
        return 1

    try:
        entry = Entry.load(entry_path, context)
    except ValueError:
        print(f"Entry {entry_path} is outside the password store {config.password_store}", file=sys.stderr)
        return 2

    try:
        entry.decrypt()
    except AutopassError as exc:
        print(f"Store error: {exc}", file=sys.stderr)
        return 1

    if args.command == "show":
        if args.cache:
            update_cache(config.cache_file, [entry])
        return _handle_show(entry, as_json=args.json, password_key=config.password_key)
    if args.command == "match":
        return 0 if entry.match(args.title) else 1
    if args.command == "open":
        try:
            entry.open_url()
        except URLNotFoundError as exc:
            print(f"{entry.name}: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_show(entry: Entry, *, as_json: bool, password_key: str) -> int:
    if as_json:
        print(entry.to_json())
        return 0

    print(entry.name)
    for key, value in sorted(entry.attributes.items()):
        if key == password_key:
            continue
        print(f"  {key}: {value}")
    return 1 if entry.has_error else 0


if __name__ == "__main__":
    raise SystemExit(main())
