"""Core utilities for lexical path handling and symbolic link expansion.

Paths are plain strings throughout. ``expand_path`` never touches the
filesystem; ``expand_link`` only asks whether a path is a link and where it
points.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, List, Optional

from shellkit.exceptions import InvalidArgument, LinkCycle
from shellkit import system

_LOGGER = logging.getLogger("shellkit.core")

_MAX_LINK_DEPTH_ENV = "SHELLKIT_MAX_LINK_DEPTH"
DEFAULT_MAX_LINK_DEPTH = 40

# Inputs returned untouched, kept for compatibility with existing callers.
_VERBATIM_PATHS = frozenset({"..", "/.."})
_PARENT_RUN = re.compile(r"(?:.*/)?\.\.", re.DOTALL)


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be a string, got {type(value).__name__}")
    return value


def basename(path: str) -> str:
    """Return the final segment of *path*, ignoring trailing slashes.

    ``basename("/")`` is ``"/"`` and ``basename("")`` is ``""``.
    """

    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else ""
    return stripped.rsplit("/", 1)[-1]


def dirname(path: str) -> str:
    """Return *path* without its final segment, ignoring trailing slashes.

    A path without any ``/`` has the directory ``"."``; the parent of a
    top-level entry is ``"/"``.
    """

    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    if "/" not in stripped:
        return "."
    head = stripped.rsplit("/", 1)[0].rstrip("/")
    return head or "/"


def join_path(base: str, target: str) -> str:
    """Join *target* onto the directory *base* by string concatenation.

    An absolute *target* is returned unchanged. Otherwise every trailing slash
    of *base* is dropped before the two are joined with a single ``/``.
    """

    _require_str("base", base)
    _require_str("target", target)
    if not base or not target:
        raise InvalidArgument("usage: join_path base_dir target_path")

    if target.startswith("/"):
        return target
    return f"{base.rstrip('/')}/{target}"


def _append_segment(expanded_dir: str, segment: str) -> str:
    if segment == ".":
        path = expanded_dir
    elif segment == ".." and not _PARENT_RUN.fullmatch(expanded_dir):
        path = dirname(expanded_dir)
    elif expanded_dir.endswith("/"):
        path = expanded_dir + segment
    else:
        path = f"{expanded_dir}/{segment}"

    if path.startswith("./"):
        path = path[2:]
    return path


def expand_path(path: str) -> str:
    """Collapse ``.`` and ``..`` segments of *path* without touching the filesystem.

    The path is taken apart from the right into ``(dirname, basename)`` pairs
    until the remaining directory is the root, ``"."`` or one of the verbatim
    inputs, and the collected segments are then folded back on from the left.
    A ``..`` only cancels a preceding segment that is not itself ``..``, so
    parent references that climb above a relative start or above the root are
    kept as written, e.g. ``/../b/././../../a`` becomes ``/../../a``.
    """

    _require_str("path", path)

    segments: List[str] = []
    current = path
    while True:
        if current in _VERBATIM_PATHS:
            expanded = current
            break
        head, tail = dirname(current), basename(current)
        if tail == "/":
            expanded = "/"
            break
        if head in ("/", "/."):
            expanded = "/" if tail == "." else f"/{tail}"
            break
        if head == ".":
            expanded = tail
            break
        segments.append(tail)
        current = head

    for segment in reversed(segments):
        expanded = _append_segment(expanded, segment)
    return expanded


def max_link_depth() -> int:
    """Return the configured hop limit for ``expand_link``.

    Raises:
        InvalidArgument: If ``SHELLKIT_MAX_LINK_DEPTH`` is not a positive integer.
    """

    raw = os.getenv(_MAX_LINK_DEPTH_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_LINK_DEPTH
    try:
        depth = int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"{_MAX_LINK_DEPTH_ENV} must be a positive integer") from exc
    if depth < 1:
        raise InvalidArgument(f"{_MAX_LINK_DEPTH_ENV} must be a positive integer")
    return depth


def expand_link(
    path: str,
    *,
    is_symlink: Optional[Callable[[str], bool]] = None,
    read_link: Optional[Callable[[str], str]] = None,
    max_depth: Optional[int] = None,
) -> str:
    """Follow symbolic links from *path* to the end of the chain, then normalize.

    Each hop joins the directory of the current link with the link's stored
    target, so relative and absolute targets can be mixed along the chain.
    *is_symlink* and *read_link* default to the host filesystem queries in
    :mod:`shellkit.system`.

    Raises:
        LinkCycle: If a path repeats or more than *max_depth* links are followed.
    """

    _require_str("path", path)
    check_link = is_symlink or system.is_symlink
    resolve_link = read_link or system.read_link
    limit = max_depth if max_depth is not None else max_link_depth()
    if limit < 1:
        raise InvalidArgument("max_depth must be a positive integer")

    chain: List[str] = []
    seen = set()
    current = path
    while check_link(current):
        if current in seen or len(chain) >= limit:
            raise LinkCycle(current, chain)
        seen.add(current)
        chain.append(current)
        target = resolve_link(current)
        resolved = join_path(dirname(current), target)
        _LOGGER.debug("link %s -> %s (%s)", current, target, resolved)
        current = resolved

    return expand_path(current)


__all__ = [
    "DEFAULT_MAX_LINK_DEPTH",
    "basename",
    "dirname",
    "expand_link",
    "expand_path",
    "join_path",
    "max_link_depth",
]
