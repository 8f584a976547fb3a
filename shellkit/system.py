"""Filesystem and platform queries used by the path helpers."""

from __future__ import annotations

import os
import platform

from shellkit.exceptions import NotASymlink


def is_symlink(path: str) -> bool:
    """Return True when *path* itself is a symbolic link (the link is not followed)."""

    return os.path.islink(path)


def read_link(path: str) -> str:
    """Return the target stored in the symbolic link at *path*, one hop only.

    Raises:
        NotASymlink: If *path* is not a symbolic link.
    """

    if not os.path.islink(path):
        raise NotASymlink(path)
    return os.readlink(path)


def inode(path: str) -> int:
    """Return the inode number of *path* without following a final link."""

    return os.lstat(path).st_ino


def same_file(first: str, second: str) -> bool:
    """Return True when both paths exist and resolve to the same file."""

    try:
        return os.path.samefile(first, second)
    except OSError:
        return False


def same_inode(first: str, second: str) -> bool:
    """Compare inode numbers of two paths; symbolic links are not followed."""

    try:
        first_stat = os.lstat(first)
        second_stat = os.lstat(second)
    except OSError:
        return False
    return (first_stat.st_dev, first_stat.st_ino) == (second_stat.st_dev, second_stat.st_ino)


def in_mac() -> bool:
    return platform.system() == "Darwin"


def in_linux() -> bool:
    return platform.system() == "Linux"


__all__ = [
    "in_linux",
    "in_mac",
    "inode",
    "is_symlink",
    "read_link",
    "same_file",
    "same_inode",
]
