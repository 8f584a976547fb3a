"""Allow ``python -m shellkit``."""

from __future__ import annotations

from shellkit.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
