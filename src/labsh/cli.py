"""Command-line interface for labsh."""

import argparse
import logging
import os
import sys

from labsh import __version__
from labsh.config import load_config
from labsh.errors import ConfigError
from labsh.models import ShellSession
from labsh.shell import shell_loop

log = logging.getLogger("labsh")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labsh",
        description="Minimal shell: runs each input line as an executable path",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--prompt", help="Prompt written before each read")
    parser.add_argument("--banner", help="Line written once at startup (empty to disable)")
    parser.add_argument(
        "--max-line-length",
        type=int,
        help="Command buffer size in bytes, terminator included",
    )
    parser.add_argument(
        "--no-echo",
        dest="echo",
        action="store_false",
        default=None,
        help="Do not echo each command before running it",
    )
    parser.add_argument(
        "--report-status",
        action="store_true",
        default=None,
        help="Write each child's exit status to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if not hasattr(os, "fork"):
        print("Error: labsh requires a POSIX environment", file=sys.stderr)
        return 1

    try:
        config = load_config(
            prompt=args.prompt,
            banner=args.banner,
            max_line_length=args.max_line_length,
            echo=args.echo,
            report_status=args.report_status,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    session = ShellSession.from_std(config)
    try:
        report = shell_loop(session)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    log.debug("ran %d commands", report.commands_run)
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
