"""Command line entry point for shellkit."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from shellkit.core import expand_link, expand_path, join_path
from shellkit.exceptions import ShellKitError
from shellkit.notify import notify
from shellkit.selftest import build_registry
from shellkit.system import inode, same_file, same_inode
from shellkit.testing import DEFAULT_PATTERN, run_suite, unit_test

_LOGGER = logging.getLogger("shellkit.cli")


def _load_env_file(path: str | None = None) -> None:
    """Load SHELLKIT_* settings from a .env file without overriding the environment."""

    env_path = path or os.path.join(os.path.dirname(__file__), "..", ".env")
    load_dotenv(dotenv_path=env_path)


def _configure_logging() -> None:
    log_level = os.getenv("SHELLKIT_LOG_LEVEL", "INFO")
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shellkit", description="Shell helper routines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    join_parser = subparsers.add_parser(
        "join", aliases=["join-path"], help="Join a target path onto a base directory"
    )
    join_parser.add_argument("base", help="Base directory")
    join_parser.add_argument("target", help="Relative or absolute target path")

    normalize_parser = subparsers.add_parser(
        "normalize", aliases=["expand-path"], help="Collapse '.' and '..' segments lexically"
    )
    normalize_parser.add_argument("path", help="Path to normalize")

    link_parser = subparsers.add_parser("expand-link", help="Follow symbolic links and normalize")
    link_parser.add_argument("path", help="Path that may be a symbolic link")
    link_parser.add_argument(
        "--max-depth", dest="max_depth", type=int, help="Maximum number of links to follow"
    )

    same_file_parser = subparsers.add_parser(
        "same-file", help="Exit 0 when both paths are the same file, following links"
    )
    same_file_parser.add_argument("first")
    same_file_parser.add_argument("second")

    same_inode_parser = subparsers.add_parser(
        "same-inode", help="Exit 0 when both paths share an inode, without following links"
    )
    same_inode_parser.add_argument("first")
    same_inode_parser.add_argument("second")

    inode_parser = subparsers.add_parser("inode", help="Print the inode number of a path")
    inode_parser.add_argument("path")

    notify_parser = subparsers.add_parser("notify", help="Show a desktop notification")
    notify_parser.add_argument(
        "words", nargs="+", metavar="[TITLE] MESSAGE", help="Optional title followed by the message"
    )

    test_parser = subparsers.add_parser("test", help="Run registry-based test files")
    test_parser.add_argument("targets", nargs="+", help="Python files defining load_tests(registry)")
    test_parser.add_argument(
        "--pattern", default=DEFAULT_PATTERN, help=f"Case name pattern (default: {DEFAULT_PATTERN})"
    )
    test_parser.add_argument("--log-path", dest="log_path", help="Append JSONL results to this file")

    selftest_parser = subparsers.add_parser("selftest", help="Run the built-in path helper suite")
    selftest_parser.add_argument("--log-path", dest="log_path", help="Append JSONL results to this file")

    return parser


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    command = args.command

    if command in ("join", "join-path"):
        print(join_path(args.base, args.target))
        return 0

    if command in ("normalize", "expand-path"):
        print(expand_path(args.path))
        return 0

    if command == "expand-link":
        print(expand_link(args.path, max_depth=args.max_depth))
        return 0

    if command == "same-file":
        return 0 if same_file(args.first, args.second) else 1

    if command == "same-inode":
        return 0 if same_inode(args.first, args.second) else 1

    if command == "inode":
        try:
            print(inode(args.path))
        except OSError as exc:
            _LOGGER.error("Cannot stat %s: %s", args.path, exc)
            return 1
        return 0

    if command == "notify":
        if len(args.words) > 2:
            parser.error("usage: notify message | notify title message")
        if len(args.words) == 2:
            notify(args.words[1], title=args.words[0])
        else:
            notify(args.words[0])
        return 0

    if command == "test":
        return unit_test(*args.targets, pattern=args.pattern, log_path=args.log_path)

    if command == "selftest":
        passed = run_suite("shellkit.selftest", build_registry(), log_path=args.log_path)
        return 0 if passed else 1

    parser.error("Unknown command")
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the shellkit CLI."""

    _load_env_file()
    _configure_logging()

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        return _run(args, parser)
    except ShellKitError as exc:
        _LOGGER.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
