"""Minimal registry-driven unit test runner.

A target file exposes ``load_tests(registry)`` and registers its cases on the
registry it is handed::

    def load_tests(registry):
        @registry.case
        def test_join():
            assert_eq(join_path("a", "b"), "a/b")

Each file is loaded into a fresh registry, its matching cases run in name
order, and the run stops at the first failure.
"""

from __future__ import annotations

import importlib.util
import logging
import os
import re
import sys
import traceback
from typing import Callable, Dict, Iterator, List, Optional, TextIO

from shellkit.diagnostics import assert_exists
from shellkit.exceptions import InvalidArgument
from shellkit.functional import select
from shellkit.logging import log_test_result

_LOGGER = logging.getLogger("shellkit.testing")

DEFAULT_PATTERN = r"^test_.+$"

CaseFunc = Callable[[], object]


class CaseRegistry:
    """Named test cases, registered explicitly instead of discovered by reflection."""

    def __init__(self) -> None:
        self._cases: Dict[str, CaseFunc] = {}

    def __len__(self) -> int:
        return len(self._cases)

    def __contains__(self, name: object) -> bool:
        return name in self._cases

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def add(self, name: str, func: CaseFunc) -> CaseFunc:
        if not name:
            raise InvalidArgument("test case name must be a non-empty string")
        if name in self._cases:
            raise InvalidArgument(f"duplicate test case: {name}")
        self._cases[name] = func
        return func

    def case(self, func: Optional[CaseFunc] = None, *, name: Optional[str] = None):
        """Register *func* under its own name, or under *name* when given.

        Usable bare (``@registry.case``) or with arguments
        (``@registry.case(name="test_other")``).
        """

        def _register(target: CaseFunc) -> CaseFunc:
            return self.add(name or target.__name__, target)

        if func is None:
            return _register
        return _register(func)

    def get(self, name: str) -> CaseFunc:
        return self._cases[name]

    def names(self) -> List[str]:
        return sorted(self._cases)

    def matching(self, pattern: str = DEFAULT_PATTERN) -> List[str]:
        compiled = re.compile(pattern)
        return select(lambda name: compiled.search(name), self.names())


def load_target(path: str, registry: Optional[CaseRegistry] = None) -> CaseRegistry:
    """Import the Python file at *path* and let its ``load_tests`` fill a registry.

    Raises:
        InvalidArgument: If the file cannot be imported or has no ``load_tests``.
    """

    registry = registry if registry is not None else CaseRegistry()
    stem = re.sub(r"\W", "_", os.path.splitext(os.path.basename(path))[0])
    module_name = f"_shellkit_target_{stem}_{id(registry):x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise InvalidArgument(f"[{path}] is not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    load_tests = getattr(module, "load_tests", None)
    if not callable(load_tests):
        raise InvalidArgument(f"[{path}] does not define load_tests(registry)")
    load_tests(registry)
    _LOGGER.debug("loaded %d test case(s) from %s", len(registry), path)
    return registry


def _format_failure(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()


def run_suite(
    label: str,
    registry: CaseRegistry,
    *,
    pattern: str = DEFAULT_PATTERN,
    out: Optional[TextIO] = None,
    log_path: Optional[str] = None,
) -> bool:
    """Run every case of *registry* whose name matches *pattern*.

    Progress is written to *out* (stdout by default) as
    ``run test [name]...CLEAR``. The first failing case prints ``FAILED``
    followed by its traceback and ends the run. Returns True when every case
    passed.
    """

    stream = out or sys.stdout
    print(f"> {label}", file=stream)
    for name in registry.matching(pattern):
        print(f"run test [{name}]...", end="", file=stream, flush=True)
        try:
            registry.get(name)()
        except (Exception, SystemExit) as exc:
            print("FAILED", file=stream)
            print(_format_failure(exc), file=stream, flush=True)
            log_test_result(
                {"suite": label, "test": name, "status": "failed", "error": str(exc)},
                path=log_path,
            )
            _LOGGER.debug("test %s in %s failed: %s", name, label, exc)
            return False
        print("CLEAR", file=stream, flush=True)
        log_test_result({"suite": label, "test": name, "status": "passed"}, path=log_path)
    return True


def unit_test(
    *paths: str,
    pattern: str = DEFAULT_PATTERN,
    out: Optional[TextIO] = None,
    log_path: Optional[str] = None,
) -> int:
    """Load and run the test files at *paths* in order.

    Returns 0 when every case passed and 1 as soon as one fails.

    Raises:
        InvalidArgument: If no paths are given.
        AssertionFailure: If any of the paths does not exist.
    """

    if not paths:
        raise InvalidArgument("usage: unit_test target.py ...")
    assert_exists(*paths)

    for path in paths:
        registry = load_target(path)
        if not run_suite(path, registry, pattern=pattern, out=out, log_path=log_path):
            return 1
    return 0


__all__ = ["DEFAULT_PATTERN", "CaseRegistry", "load_target", "run_suite", "unit_test"]
