# user_error/cli/main.py
"""
`user-error` command

Lets shell scripts report failures in the same layout as Python programs:

    user-error show "Failed to build project" \
        -r "Database could not be parsed" \
        -r 'File "main.db" not found' \
        --help-text "Try: touch main.db"

`show` exits with status 1 after printing, unless --no-exit is given.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from user_error.config import COLOR_MODES, load_config, read_yaml, set_config, validate_config
from user_error.core.errors import EmptySummaryError, StructuredError, codes
from user_error.cli.terminal import resolve_color


def run_show(args) -> int:
    try:
        err = StructuredError.new(args.summary)
    except EmptySummaryError as e:
        print(f"user-error: {e}", file=sys.stderr)
        return 2

    for reason in args.reason or []:
        err.reason(reason)
    if args.help_text:
        err.help(args.help_text)

    color = resolve_color(sys.stderr, args.color) if args.color else None

    if args.no_exit:
        err.print(color=color)
        return codes.EXIT_FAILURE
    err.print_and_exit(color=color)


def run_config(args) -> int:
    """Print the effective configuration and any issues in the config file."""
    path = Path(args.config) if args.config else None
    config = load_config(path)
    print(json.dumps(config.to_dict(), indent=2))

    raw = read_yaml(path) or {}
    issues = validate_config(raw)
    for issue in issues:
        print(str(issue), file=sys.stderr)
    return 1 if any(i.level == "error" for i in issues) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="user-error",
        description="Print well-formatted errors for CLI users",
    )
    parser.add_argument("--config", help="Path to config YAML (default: ~/.user_error/config.yml)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    show_p = sub.add_parser("show", help="Print an error to stderr and exit with status 1")
    show_p.add_argument("summary", help="One-line summary of what failed")
    show_p.add_argument("--reason", "-r", action="append", help="Reason line (repeatable, shown in order)")
    show_p.add_argument("--help-text", dest="help_text", help="Trailing hint line")
    show_p.add_argument("--color", choices=COLOR_MODES, default=None,
                        help="Override configured color mode")
    show_p.add_argument("--no-exit", action="store_true", help="Return instead of exiting")

    sub.add_parser("config", help="Show effective configuration")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.config:
        set_config(load_config(Path(args.config)))

    if args.command == "show":
        return run_show(args)
    if args.command == "config":
        return run_config(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
