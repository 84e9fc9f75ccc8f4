"""Command-line front door for oldest/newest.

Parses CLI options, resolves the target directory and selection mode, then
prints the chosen file name. Errors exit with status 1, logged to stderr only
in verbose mode.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from . import config
from .errors import NotADirectoryTargetError, OldestError
from .file_model import is_directory
from .reporting import ErrorReporter, configure_logging
from .selection import TimeComparator, find_file

USAGE_NOTE = "Note: Search is not recursive. Default path is CWD"


def program_name(argv0: str | None = None) -> str:
    """Return the invoked program name without directories or extension."""
    raw = argv0 if argv0 is not None else (sys.argv[0] if sys.argv else "")
    if not raw:
        return config.APP_NAME
    name = Path(os.path.normpath(raw)).stem
    # ``python -m oldest`` runs as __main__
    return config.APP_NAME if name == "__main__" else name


def invoked_as_newest(argv0: str | None = None) -> bool:
    """Return whether the program was started under a ``...newest`` name."""
    return program_name(argv0).endswith("newest")


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s [OPTIONS] [path to search]",
        description="Print the oldest or newest regular file in a directory.",
        epilog=USAGE_NOTE,
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to search. Defaults to current directory.")
    parser.add_argument("--oldest", action="store_true", help="Search for oldest")
    parser.add_argument("--newest", action="store_true", help="Search for newest")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    return parser


def resolve_comparator(
    args: argparse.Namespace,
    argv0: str | None = None,
    default_mode: str | None = None,
) -> TimeComparator:
    """Pick the selection mode.

    ``--oldest`` wins over ``--newest``; either flag wins over the invocation
    name, which in turn wins over ``default_mode`` from config.
    """
    if args.oldest:
        return TimeComparator.BEFORE
    if args.newest:
        return TimeComparator.AFTER
    if invoked_as_newest(argv0):
        return TimeComparator.AFTER
    if default_mode is not None:
        return TimeComparator.from_mode(default_mode)
    return TimeComparator.BEFORE


def resolve_target(args: argparse.Namespace, reporter: ErrorReporter, default_path: Path | None = None) -> Path:
    """Return the directory to search, failing through ``reporter`` when invalid."""
    if not args.path:
        if default_path is not None:
            return default_path
        try:
            return Path.cwd()
        except OSError as exc:
            reporter.fail(exc)

    if not is_directory(args.path):
        reporter.fail(NotADirectoryTargetError(args.path))
    return Path(args.path)


def write_result(name: str, stream: TextIO | None = None) -> None:
    """Print ``name`` plus a newline as raw filesystem bytes.

    Undecodable names arrive surrogate-escaped from ``os.scandir``; encoding
    them back with ``os.fsencode`` reproduces the on-disk bytes. Streams
    without a binary ``buffer`` get the text form.
    """
    out = stream if stream is not None else sys.stdout
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(name + "\n")
        return
    out.flush()
    buffer.write(os.fsencode(name) + b"\n")
    buffer.flush()


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the selected file name.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    argv0 = sys.argv[0] if sys.argv else None
    parser = build_parser(prog=program_name(argv0))
    args = parser.parse_args(argv)

    configure_logging()
    reporter = ErrorReporter(verbose=args.verbose or config.load_verbose())
    comparator = resolve_comparator(args, argv0, config.load_default_mode())
    target = resolve_target(args, reporter, default_path)

    try:
        result = find_file(target, comparator)
    except (OSError, OldestError) as exc:
        reporter.fail(exc)

    write_result(result)


if __name__ == "__main__":
    main()
