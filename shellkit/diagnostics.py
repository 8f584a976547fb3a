"""Error reporting and assertion helpers."""

from __future__ import annotations

import os
import sys
import traceback
from typing import Any, NoReturn, Optional

from shellkit.exceptions import AssertionFailure, InvalidArgument, UnsupportedPlatform
from shellkit.system import in_mac

ERROR_STATUS = 255


def stderr(*messages: Any) -> None:
    """Write *messages* to standard error, separated by spaces."""

    print(*messages, file=sys.stderr)


def print_stack_trace() -> None:
    """Print the callers of this function to stderr, innermost first.

    Each frame is printed as ``LINE FUNCTION FILE``.
    """

    stderr("== stack trace ==")
    # Drop this function's own frame.
    frames = traceback.extract_stack()[:-1]
    for frame in reversed(frames):
        stderr(f"{frame.lineno} {frame.name} {frame.filename}")


def error(*messages: Any, status: int = ERROR_STATUS) -> NoReturn:
    """Print a stack trace and *messages* to stderr, then exit with *status*."""

    print_stack_trace()
    if messages:
        stderr(*messages)
    raise SystemExit(status)


def assert_eq(actual: Any, expected: Any, message: Optional[str] = None) -> None:
    """Raise :class:`AssertionFailure` unless *actual* equals *expected*."""

    if actual != expected:
        raise AssertionFailure(message or f"assert_eq error: [{actual}] [{expected}]")


def assert_exists(*paths: str) -> None:
    """Raise :class:`AssertionFailure` for the first of *paths* that does not exist."""

    if not paths:
        raise InvalidArgument("usage: assert_exists file1 ...")
    for path in paths:
        if not os.path.exists(path):
            raise AssertionFailure(f"[{path}] does not exist.")


def assert_mac() -> None:
    if not in_mac():
        raise UnsupportedPlatform("this platform is not Mac OS.")


__all__ = [
    "ERROR_STATUS",
    "assert_eq",
    "assert_exists",
    "assert_mac",
    "error",
    "print_stack_trace",
    "stderr",
]
