"""Utilities for structured logging of shellkit test runs."""

from __future__ import annotations

import datetime as _dt
import json
import os
from typing import Any, Dict, Optional

_TEST_LOG_ENV = "SHELLKIT_TEST_LOG"


def log_jsonl(path: str, record: Dict[str, Any]) -> None:
    """Append *record* as a JSON line to *path*.

    The target directory is created when missing and every record is written
    as UTF-8 JSON followed by a newline, so the file can be read back as a
    JSONL stream.
    """

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, sort_keys=True))
        handle.write("\n")


def resolve_log_path(path: Optional[str] = None) -> Optional[str]:
    """Return *path*, or the ``SHELLKIT_TEST_LOG`` location when none is given."""

    return path or os.getenv(_TEST_LOG_ENV) or None


def log_test_result(record: Dict[str, Any], *, path: Optional[str] = None) -> None:
    """Append a timestamped test record when a log location is configured."""

    target = resolve_log_path(path)
    if not target:
        return
    payload = dict(record)
    payload.setdefault("timestamp", _dt.datetime.now(tz=_dt.timezone.utc).isoformat())
    log_jsonl(target, payload)


__all__ = ["log_jsonl", "log_test_result", "resolve_log_path"]
