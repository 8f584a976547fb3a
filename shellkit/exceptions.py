"""Shared exceptions for shellkit helpers."""

from __future__ import annotations

from typing import Sequence


class ShellKitError(Exception):
    """Base class for every error raised by shellkit."""


class InvalidArgument(ShellKitError, ValueError):
    """Raised when a helper is called with arguments it cannot accept."""


class NotASymlink(ShellKitError, OSError):
    """Raised when a link target is requested for a path that is not a link."""

    def __init__(self, path: str) -> None:
        super().__init__(f"[{path}] is not a symbolic link")
        self.path = path


class LinkCycle(ShellKitError, RuntimeError):
    """Raised when symbolic link resolution never reaches a non-link path."""

    def __init__(self, path: str, chain: Sequence[str]) -> None:
        hops = " -> ".join([*chain, path])
        super().__init__(f"symbolic link cycle detected: {hops}")
        self.path = path
        self.chain = list(chain)


class AssertionFailure(ShellKitError, AssertionError):
    """Raised by the assertion helpers when a check does not hold."""


class UnsupportedPlatform(ShellKitError):
    """Raised when a helper requires a platform other than the current one."""


class NotificationError(ShellKitError):
    """Raised when the desktop notifier cannot be run."""


__all__ = [
    "AssertionFailure",
    "InvalidArgument",
    "LinkCycle",
    "NotASymlink",
    "NotificationError",
    "ShellKitError",
    "UnsupportedPlatform",
]
