"""Global pytest configuration for the shellkit suite."""

from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from shellkit import cli


@pytest.fixture(autouse=True)
def _isolate_shellkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SHELLKIT_* settings from the developer's shell and ``.env`` out of the tests."""

    monkeypatch.setattr(cli, "_load_env_file", lambda path=None: None)
    for name in ("SHELLKIT_MAX_LINK_DEPTH", "SHELLKIT_NOTIFIER", "SHELLKIT_TEST_LOG", "SHELLKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
